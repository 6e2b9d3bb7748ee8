import argparse
import sys

from .browser import fetch_html
from .config import MissingUrlError, build_run_config
from .logging_utils import log_error, log_info, set_verbose
from .settings import PROG_NAME


DESCRIPTION = (
    "Fetches a web page in a headless browser and outputs the rendered HTML "
    "content to stdout. Supports cookie loading and screenshot capture."
)

EPILOG = f"""\
examples:
  # Basic usage - fetch a page and output HTML
  {PROG_NAME} https://example.com

  # Save HTML to a file
  {PROG_NAME} https://example.com > page.html

  # Take a screenshot
  {PROG_NAME} -s screenshot.png https://example.com

  # Load cookies from a JSON file
  {PROG_NAME} -c cookies.json https://example.com

  # Combine options
  {PROG_NAME} -c cookies.json -s shot.png -v https://example.com

cookie file format:
  The cookie file should be a JSON array of cookie objects:
  [
    {{
      "name": "session",
      "value": "abc123",
      "domain": ".example.com",
      "path": "/",
      "httpOnly": true,
      "secure": true
    }}
  ]
"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "target",
        nargs="*",
        metavar="url",
        help="URL to fetch. Takes precedence over --url when both are given.",
    )
    parser.add_argument(
        "-u",
        "--url",
        help="URL to fetch (can also be passed as positional arg).",
    )
    parser.add_argument(
        "-c",
        "--loadcookies",
        metavar="FILE",
        help="Path to JSON file containing cookies to load.",
    )
    parser.add_argument(
        "-s",
        "--screenshot",
        metavar="FILE",
        help="Save a screenshot to the specified path.",
    )
    parser.add_argument(
        "-a",
        "--user-agent",
        metavar="USER_AGENT",
        help="Set the user agent.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output on stderr.",
    )
    parser.add_argument(
        "-n",
        "--noheadless",
        action="store_true",
        help="Run browser in non-headless mode (visible window).",
    )
    return parser


def write_html(html):
    sys.stdout.write(html + "\n")
    sys.stdout.flush()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    try:
        config = build_run_config(args)
    except MissingUrlError as exc:
        log_error(str(exc))
        parser.print_help(sys.stderr)
        return 1
    except FileNotFoundError as exc:
        log_error(str(exc))
        return 1

    set_verbose(config.verbose)
    log_info("Configuration", **config.describe())

    try:
        fetch_html(config, write_html)
    except Exception as exc:
        log_error(str(exc) or exc.__class__.__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
