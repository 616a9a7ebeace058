"""
Pytest configuration for integration tests

These tests drive a real headless Chromium against fixture pages served
through Playwright request routing. They are skipped when no browser is
installed (run `playwright install chromium`).
"""

from contextlib import asynccontextmanager
from pathlib import Path

import pytest

from findadoc_core.browser_setup import PlaywrightLauncher
from findadoc_core.config import Config

FIXTURES = Path(__file__).parent / "fixtures"


class FixtureSiteLauncher(PlaywrightLauncher):
    """Real Chromium whose network requests are answered from fixture files"""

    def __init__(self, cfg, fixture_name):
        super().__init__(cfg)
        self.html = (FIXTURES / fixture_name).read_text(encoding="utf-8")

    @asynccontextmanager
    async def session(self):
        async with super().session() as page:
            async def fulfill(route):
                await route.fulfill(status=200, content_type="text/html", body=self.html)

            await page.route("**/*", fulfill)
            yield page


@pytest.fixture
def site_config(tmp_path):
    return Config(
        target_url="http://find-a-doctor.test/care-services/doctors",
        headless=True,
        use_cdp=False,
        executable_path=None,
        nav_backoff_s=0,
        load_settle_ms=100,
        field_settle_ms=50,
        submit_settle_ms=300,
        page_settle_ms=300,
        type_delay_ms=5,
        max_pages=2,
        wait_until="load",
        screenshot_dir=tmp_path / "screenshots",
    )


@pytest.fixture
def site_launcher(site_config):
    def _make(fixture_name):
        return FixtureSiteLauncher(site_config, fixture_name)
    return _make
