from dataclasses import dataclass
from typing import Optional

from .cookies import resolve_cookie_path


class MissingUrlError(ValueError):
    pass


@dataclass(frozen=True)
class RunConfig:
    url: str
    cookies_file: Optional[str] = None
    screenshot: Optional[str] = None
    user_agent: Optional[str] = None
    verbose: bool = False
    headless: bool = True

    def describe(self):
        fields = {
            "url": self.url,
            "cookies": self.cookies_file or "none",
            "screenshot": self.screenshot or "none",
            "headless": self.headless,
        }
        if self.user_agent:
            fields["user_agent"] = self.user_agent
        return fields


def select_url(positionals, url_option):
    # A positional URL takes precedence over --url.
    if positionals:
        return positionals[0]
    return url_option or None


def build_run_config(args, cwd=None):
    url = select_url(args.target, args.url)
    if not url:
        raise MissingUrlError("No URL provided")

    cookies_file = None
    if args.loadcookies:
        cookies_file = resolve_cookie_path(args.loadcookies, cwd=cwd)

    return RunConfig(
        url=url,
        cookies_file=cookies_file,
        screenshot=args.screenshot or None,
        user_agent=args.user_agent or None,
        verbose=args.verbose,
        headless=not args.noheadless,
    )
