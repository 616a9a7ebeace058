"""
Shared fixtures: Playwright page doubles and a launcher that hands them out.
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest

from findadoc_core.browser_setup import BrowserLauncher
from findadoc_core.config import Config
from findadoc_core.dom_selectors import IS_DISABLED_JS


def make_element(disabled=False):
    """Element handle double; evaluate() answers the disabled check"""
    element = MagicMock()
    element.focus = AsyncMock()
    element.click = AsyncMock()

    async def evaluate(script, *args):
        if script == IS_DISABLED_JS:
            return disabled
        return None

    element.evaluate = AsyncMock(side_effect=evaluate)
    return element


def make_page(elements=None, pages=None, goto_errors=None):
    """
    Page double.

    elements: selector -> element handle, or an Exception to raise on lookup
    pages: list of record lists returned by successive extraction calls
    goto_errors: exceptions raised by the first goto() calls
    """
    elements = elements or {}
    pending_pages = list(pages or [])
    pending_goto_errors = list(goto_errors or [])

    page = MagicMock()
    page.queried = []

    async def query_selector(selector):
        page.queried.append(selector)
        found = elements.get(selector)
        if isinstance(found, Exception):
            raise found
        return found

    async def goto(url, **kwargs):
        if pending_goto_errors:
            raise pending_goto_errors.pop(0)
        return MagicMock(status=200)

    async def evaluate(script, *args):
        if pending_pages:
            return pending_pages.pop(0)
        return []

    page.query_selector = AsyncMock(side_effect=query_selector)
    page.goto = AsyncMock(side_effect=goto)
    page.evaluate = AsyncMock(side_effect=evaluate)
    page.wait_for_timeout = AsyncMock()
    page.screenshot = AsyncMock()
    page.keyboard = MagicMock()
    page.keyboard.type = AsyncMock()
    page.keyboard.press = AsyncMock()
    return page


class FakeLauncher(BrowserLauncher):
    """Hands out a prepared page and counts session open/close"""

    def __init__(self, page=None, error=None):
        self.page = page
        self.error = error
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def session(self):
        if self.error is not None:
            raise self.error
        self.opened += 1
        try:
            yield self.page
        finally:
            self.closed += 1


@pytest.fixture
def fast_config(tmp_path):
    """Config with every delay zeroed"""
    return Config(
        target_url="https://hospital.example/find-a-doctor",
        nav_backoff_s=0,
        load_settle_ms=0,
        field_settle_ms=0,
        submit_settle_ms=0,
        page_settle_ms=0,
        type_delay_ms=0,
        max_pages=2,
        debug_screenshot=False,
        screenshot_dir=tmp_path / "screenshots",
        progress_keepalive_s=0.05,
    )


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def element_factory():
    return make_element


@pytest.fixture
def launcher_factory():
    return FakeLauncher
