#!/usr/bin/env python3
"""
Browser acquisition for search runs.

The driver only needs a page; how the browser behind it is obtained (local
Chromium, a specific Chrome binary, or a remote CDP endpoint) is a launcher
concern selected by configuration.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from .config import Config, config as default_config
from .errors import LaunchError

logger = logging.getLogger(__name__)

SANDBOX_ARGS: List[str] = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]


class BrowserLauncher:
    """Hands out one page per search run and releases it afterwards"""

    def session(self):
        """Return an async context manager yielding a ready page"""
        raise NotImplementedError


class PlaywrightLauncher(BrowserLauncher):
    """Playwright Chromium, launched locally or reached over CDP"""

    def __init__(self, cfg: Optional[Config] = None):
        self.config = cfg or default_config

    def launch_args(self) -> Dict[str, Any]:
        launch_args: Dict[str, Any] = {
            "headless": bool(self.config.headless),
            "args": list(SANDBOX_ARGS),
            "timeout": self.config.launch_timeout_ms,
        }
        if self.config.executable_path:
            launch_args["executable_path"] = self.config.executable_path
        return launch_args

    async def _open_browser(self, playwright):
        if self.config.use_cdp:
            logger.info(f"Connecting to remote browser at {self.config.cdp_url}")
            return await playwright.chromium.connect_over_cdp(
                self.config.cdp_url, timeout=self.config.launch_timeout_ms
            )
        launch_args = self.launch_args()
        logger.info(f"Launching browser with options: {launch_args}")
        return await playwright.chromium.launch(**launch_args)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[Any]:
        playwright = None
        browser = None
        try:
            try:
                from playwright.async_api import async_playwright

                playwright = await async_playwright().start()
                browser = await self._open_browser(playwright)
                page = await browser.new_page(viewport={
                    "width": self.config.viewport_width,
                    "height": self.config.viewport_height,
                })
                page.set_default_timeout(self.config.action_timeout_ms)
            except Exception as e:
                raise LaunchError(f"Failed to launch browser: {e}") from e
            yield page
        finally:
            if browser is not None:
                try:
                    await browser.close()
                except Exception as e:
                    logger.warning(f"Error closing browser: {e}")
            if playwright is not None:
                try:
                    await playwright.stop()
                except Exception as e:
                    logger.warning(f"Error stopping playwright: {e}")
