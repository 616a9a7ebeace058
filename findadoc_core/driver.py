"""
Search Driver - runs one find-a-doctor search in a headless browser.

A run moves strictly forward through SearchState:

    IDLE -> LAUNCHING -> NAVIGATING -> FORM_FILLING -> SUBMITTING
         -> EXTRACTING (-> PAGINATING -> EXTRACTING)* -> ANALYZING -> DONE

Any state may end in FAILED. The browser session is released on every exit
path, and each transition is reported to the optional ProgressReporter.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from .browser_setup import BrowserLauncher, PlaywrightLauncher
from .classifier import classify
from .config import Config, config as default_config
from .dom_selectors import (
    CLICK_JS,
    EXTRACT_PROVIDERS_JS,
    IS_DISABLED_JS,
    NEXT_PAGE,
    ROLE_SELECTORS,
    SPECIALTY_INPUT,
    SUBMIT_BUTTON,
    ZIP_INPUT,
    find_role,
)
from .errors import ExtractionEmptyWarning, RequiredFieldNotFoundError
from .models import RawProviderRecord, SearchResult, SpecialtyConfig
from .progress import ProgressReporter
from .retry import navigate_with_retry
from .screenshots import take_debug_screenshot

logger = logging.getLogger(__name__)


class SearchState(Enum):
    """Stages of a search run"""
    IDLE = "idle"
    LAUNCHING = "launching"
    NAVIGATING = "navigating"
    FORM_FILLING = "form_filling"
    SUBMITTING = "submitting"
    EXTRACTING = "extracting"
    PAGINATING = "paginating"
    ANALYZING = "analyzing"
    DONE = "done"
    FAILED = "failed"


class SearchDriver:
    """Drives a single search against the configured find-a-doctor page"""

    def __init__(
        self,
        cfg: Optional[Config] = None,
        launcher: Optional[BrowserLauncher] = None,
        progress: Optional[ProgressReporter] = None,
        selectors: Optional[Dict[str, List[str]]] = None,
    ):
        self.config = cfg or default_config
        self.launcher = launcher or PlaywrightLauncher(self.config)
        self.progress = progress
        self.selectors = selectors if selectors is not None else ROLE_SELECTORS
        self.state = SearchState.IDLE
        self.pages_visited = 0
        self.history: List[SearchState] = [SearchState.IDLE]

    def _enter(self, state: SearchState, message: str) -> None:
        self.state = state
        self.history.append(state)
        logger.info(f"[{state.value}] {message}")
        if self.progress is None:
            return
        if state is SearchState.DONE:
            self.progress.complete(message)
        else:
            self.progress.step(message)

    def _fail(self, error: BaseException) -> None:
        self.state = SearchState.FAILED
        self.history.append(SearchState.FAILED)
        logger.error(f"Search failed: {error}")
        if self.progress is not None:
            self.progress.fail(f"Error: {error}")

    async def run(self, specialty: SpecialtyConfig, zip_code: str = "") -> SearchResult:
        """Search for `specialty` (optionally near `zip_code`) and classify the results"""
        try:
            self._enter(SearchState.LAUNCHING, "Launching browser...")
            async with self.launcher.session() as page:
                records = await self._search(page, specialty, zip_code)
            self._enter(SearchState.ANALYZING, f"Analyzing {len(records)} providers for relevance...")
            result = self._analyze(records, specialty)
            self._enter(
                SearchState.DONE,
                f"Complete: {result.relevant}/{result.total} relevant ({result.accuracy}%)",
            )
            return result
        except BaseException as e:
            self._fail(e)
            raise

    async def _search(self, page, specialty: SpecialtyConfig, zip_code: str) -> List[RawProviderRecord]:
        self._enter(SearchState.NAVIGATING, f"Navigating to {self.config.target_url}...")
        await navigate_with_retry(
            page,
            self.config.target_url,
            timeout=self.config.nav_timeout_ms,
            wait_until=self.config.wait_until,
            max_attempts=self.config.nav_attempts,
            backoff=self.config.nav_backoff_s,
        )
        await page.wait_for_timeout(self.config.load_settle_ms)

        self._enter(SearchState.FORM_FILLING, f"Entering specialty: {specialty.query}")
        await self._fill_form(page, specialty.query, zip_code)

        self._enter(SearchState.SUBMITTING, "Submitting search...")
        await self._submit(page)

        records: List[RawProviderRecord] = []
        page_number = 1
        while True:
            self._enter(SearchState.EXTRACTING, f"Extracting providers from page {page_number}...")
            page_records = await self._extract(page)
            self.pages_visited = page_number
            logger.info(f"Found {len(page_records)} providers on page {page_number}")
            records.extend(page_records)

            if page_number >= self.config.max_pages:
                break
            self._enter(SearchState.PAGINATING, "Looking for next page of results...")
            if not await self._next_page(page):
                break
            page_number += 1

        if self.config.debug_screenshot:
            await take_debug_screenshot(page, self.config.screenshot_dir)
        return records

    async def _type_into(self, page, element: Any, text: str) -> None:
        await element.focus()
        await page.keyboard.type(text, delay=self.config.type_delay_ms)
        await page.wait_for_timeout(self.config.field_settle_ms)

    async def _fill_form(self, page, query: str, zip_code: str) -> None:
        specialty_input = await find_role(page, SPECIALTY_INPUT, self.selectors)
        if not specialty_input:
            raise RequiredFieldNotFoundError(
                "specialty", "Could not find specialty search field on the page"
            )
        await self._type_into(page, specialty_input, query)

        if not zip_code:
            return
        zip_input = await find_role(page, ZIP_INPUT, self.selectors)
        if zip_input:
            logger.info(f"Typing ZIP code: {zip_code}")
            await self._type_into(page, zip_input, zip_code)
        else:
            logger.info("ZIP code field not found, continuing without location")

    async def _submit(self, page) -> None:
        button = await find_role(page, SUBMIT_BUTTON, self.selectors)
        if button:
            await button.click()
            logger.info("Clicked search button, waiting for results...")
        else:
            logger.info("No search button found, pressing Enter...")
            await page.keyboard.press("Enter")
        await page.wait_for_timeout(self.config.submit_settle_ms)

    async def _extract(self, page) -> List[RawProviderRecord]:
        raw = await asyncio.wait_for(
            page.evaluate(EXTRACT_PROVIDERS_JS),
            timeout=self.config.evaluate_timeout_s,
        )
        records = [RawProviderRecord.from_dict(item) for item in raw or []]
        return [r for r in records if r.name]

    async def _next_page(self, page) -> bool:
        """Move to the next results page; False when there is none"""
        control = await find_role(page, NEXT_PAGE, self.selectors)
        if not control:
            logger.info("No next page control found")
            return False
        disabled = await asyncio.wait_for(
            control.evaluate(IS_DISABLED_JS),
            timeout=self.config.evaluate_timeout_s,
        )
        if disabled:
            logger.info("Next page control is disabled")
            return False
        await asyncio.wait_for(
            control.evaluate(CLICK_JS),
            timeout=self.config.evaluate_timeout_s,
        )
        await page.wait_for_timeout(self.config.page_settle_ms)
        return True

    def _analyze(self, records: List[RawProviderRecord], specialty: SpecialtyConfig) -> SearchResult:
        result = classify(records, specialty.terms)
        if result.total == 0:
            result.warning = str(ExtractionEmptyWarning())
            logger.warning(result.warning)
        return result


async def run_search(
    specialty: SpecialtyConfig,
    zip_code: str = "",
    cfg: Optional[Config] = None,
    launcher: Optional[BrowserLauncher] = None,
    progress: Optional[ProgressReporter] = None,
) -> SearchResult:
    """Convenience wrapper: build a driver and run one search"""
    driver = SearchDriver(cfg=cfg, launcher=launcher, progress=progress)
    return await driver.run(specialty, zip_code)
