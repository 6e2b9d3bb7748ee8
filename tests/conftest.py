"""
pytest configuration and a recording stand-in for Playwright's sync API.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from playwright.sync_api import Error as PlaywrightError  # noqa: E402

from website2html import browser as browser_module  # noqa: E402
from website2html.logging_utils import set_verbose  # noqa: E402


SAMPLE_HTML = "<html><head><title>Example</title></head><body>Hello</body></html>"


class FakePage:
    def __init__(self, driver):
        self.driver = driver

    def goto(self, url, wait_until=None):
        self.driver.record("goto", url=url, wait_until=wait_until)
        self.driver.maybe_fail("goto")

    def screenshot(self, path=None):
        self.driver.record("screenshot", path=path)
        self.driver.maybe_fail("screenshot")
        Path(path).write_bytes(b"\x89PNG\r\n\x1a\nfake")

    def content(self):
        self.driver.record("content")
        self.driver.maybe_fail("content")
        return self.driver.html


class FakeContext:
    def __init__(self, driver):
        self.driver = driver

    def add_cookies(self, cookies):
        self.driver.record("add_cookies", cookies=cookies)
        self.driver.maybe_fail("add_cookies")

    def new_page(self):
        self.driver.record("new_page")
        return FakePage(self.driver)


class FakeBrowser:
    def __init__(self, driver):
        self.driver = driver

    def new_context(self, user_agent=None):
        self.driver.record("new_context", user_agent=user_agent)
        return FakeContext(self.driver)

    def close(self):
        self.driver.record("close")
        self.driver.maybe_fail("close")


class FakeChromium:
    def __init__(self, driver):
        self.driver = driver

    def launch(self, headless=True):
        self.driver.record("launch", headless=headless)
        self.driver.maybe_fail("launch")
        return FakeBrowser(self.driver)


class FakePlaywright:
    """Records every call so tests can assert on ordering."""

    def __init__(self, html=SAMPLE_HTML):
        self.html = html
        self.calls = []
        self.fail_on = set()
        self.raise_on = {}
        self.chromium = FakeChromium(self)

    def record(self, name, **kwargs):
        self.calls.append((name, kwargs))

    def maybe_fail(self, name):
        if name in self.fail_on:
            raise PlaywrightError(f"{name} failed")
        if name in self.raise_on:
            raise self.raise_on[name]

    def call_names(self):
        return [name for name, _ in self.calls]

    def kwargs_for(self, name):
        for call_name, kwargs in self.calls:
            if call_name == name:
                return kwargs
        return None

    def __call__(self):
        return self

    def __enter__(self):
        self.record("start")
        return self

    def __exit__(self, exc_type, exc, tb):
        self.record("stop")
        self.maybe_fail("stop")
        return False


@pytest.fixture
def fake_playwright(monkeypatch):
    driver = FakePlaywright()
    monkeypatch.setattr(browser_module, "sync_playwright", driver)
    monkeypatch.setattr(browser_module, "ensure_playwright_browsers", lambda: None)
    return driver


@pytest.fixture
def cookie_file(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_text(
        '[{"name": "session", "value": "abc123", "domain": ".example.com",'
        ' "path": "/", "httpOnly": true, "secure": true}]',
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    set_verbose(False)
    yield
    set_verbose(False)
