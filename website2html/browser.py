import os

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .cookies import load_cookies
from .logging_utils import log_info, log_warn
from .settings import BUNDLED_BROWSERS_DIR, NAVIGATION_WAIT_UNTIL


def ensure_playwright_browsers():
    if os.getenv("PLAYWRIGHT_BROWSERS_PATH"):
        return

    local_path = os.path.join(os.getcwd(), BUNDLED_BROWSERS_DIR)
    if os.path.isdir(local_path):
        os.environ["PLAYWRIGHT_BROWSERS_PATH"] = local_path


def close_browser(browser):
    try:
        browser.close()
    except PlaywrightError as exc:
        log_warn("Failed to close browser cleanly.", error=exc)


def configure_context(browser, config):
    # User agent and cookies must be in place before the first navigation.
    if config.user_agent:
        log_info("Using user agent", user_agent=config.user_agent)
    context = browser.new_context(user_agent=config.user_agent)
    if config.cookies_file:
        log_info("Loading cookies", path=config.cookies_file)
        cookies = load_cookies(config.cookies_file)
        context.add_cookies(cookies)
        log_info("Cookies installed", count=len(cookies))
    return context


def fetch_html(config, emit):
    """Load ``config.url`` in a fresh browser and pass the rendered HTML to ``emit``.

    Each step runs once, in order: launch, context (user agent and
    cookies), page, navigation until ``load``, optional screenshot, then
    ``page.content()``. ``emit`` is only called when every step succeeded.
    The browser is closed on every path once it has been launched; teardown
    errors after ``emit`` are reported as warnings.
    """
    ensure_playwright_browsers()

    emitted = False
    try:
        with sync_playwright() as p:
            log_info("Launching browser", headless=config.headless)
            browser = p.chromium.launch(headless=config.headless)
            try:
                context = configure_context(browser, config)
                page = context.new_page()

                log_info("Navigating", url=config.url)
                page.goto(config.url, wait_until=NAVIGATION_WAIT_UNTIL)

                if config.screenshot:
                    log_info("Saving screenshot", path=config.screenshot)
                    page.screenshot(path=config.screenshot)

                html = page.content()
                emit(html)
                emitted = True
            finally:
                close_browser(browser)
    except Exception as exc:
        if not emitted:
            raise
        log_warn("Browser teardown failed after output was written.", error=exc)

    log_info("Done")
