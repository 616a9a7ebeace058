"""
DOM Selectors - candidate selectors for each form role on the search page.

The target page is not under our control, so each role is described by an
ordered list of candidates rather than a single selector. Update the lists
here when the page markup drifts; the driver's control flow stays unchanged.

Usage:
    from findadoc_core.dom_selectors import ROLE_SELECTORS, find_first

    field = await find_first(page, ROLE_SELECTORS['specialty_input'])
"""

from typing import Any, Dict, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# ROLE SELECTORS
# =============================================================================

SPECIALTY_INPUT = 'specialty_input'
ZIP_INPUT = 'zip_input'
SUBMIT_BUTTON = 'submit_button'
NEXT_PAGE = 'next_page'

ROLE_SELECTORS: Dict[str, List[str]] = {
    SPECIALTY_INPUT: [
        'input[placeholder*="specialty" i]',
        'input[placeholder*="condition" i]',
        'input[name*="specialty"]',
        'input[aria-label*="specialty" i]',
        '#specialty',
        '[data-testid*="specialty"]',
    ],

    ZIP_INPUT: [
        'input[placeholder*="zip" i]',
        'input[placeholder*="location" i]',
        'input[name*="zip"]',
        'input[name*="location"]',
        '#location',
        '#zip',
    ],

    SUBMIT_BUTTON: [
        'button[type="submit"]',
        'button:has-text("Search")',
        'button:has-text("Find")',
        'input[type="submit"]',
        '[data-testid*="search"]',
        'button.search-button',
    ],

    NEXT_PAGE: [
        'a[aria-label*="next" i]',
        'button[aria-label*="next" i]',
        'a[rel="next"]',
        '[data-testid*="next"]',
        '.pagination-next',
        '.pagination .next',
        'a:has-text("Next")',
        'button:has-text("Next")',
    ],
}


# =============================================================================
# PROVIDER CARD EXTRACTION
# =============================================================================

PROVIDER_CARD_SELECTOR = (
    '[class*="provider"], [class*="doctor"], [class*="physician"], '
    '[data-testid*="provider"]'
)
PROVIDER_NAME_SELECTOR = '[class*="name"], h2, h3, h4, a[href*="provider"]'
PROVIDER_SPECIALTY_SELECTOR = '[class*="specialty"], [class*="title"]'

EXTRACT_PROVIDERS_JS = f"""
    () => {{
        const results = [];
        const cards = document.querySelectorAll('{PROVIDER_CARD_SELECTOR}');
        cards.forEach(card => {{
            const nameEl = card.querySelector('{PROVIDER_NAME_SELECTOR}');
            const name = nameEl ? nameEl.textContent.trim() : '';
            const specialtyEl = card.querySelector('{PROVIDER_SPECIALTY_SELECTOR}');
            const specialty = specialtyEl ? specialtyEl.textContent.trim() : '';
            const fullText = (card.textContent || '').toLowerCase();
            if (name) {{
                results.push({{ name, specialty, fullText }});
            }}
        }});
        return results;
    }}
"""

IS_DISABLED_JS = """
    el => el.disabled === true
        || el.hasAttribute('disabled')
        || el.classList.contains('disabled')
        || el.getAttribute('aria-disabled') === 'true'
"""

CLICK_JS = "el => el.click()"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

async def find_first(page, selectors: Sequence[str]) -> Optional[Any]:
    """
    Return the element matched by the first selector that hits.

    A selector that raises while probing (malformed, detached frame, ...) is
    treated as a miss and the next candidate is tried. Returns None when all
    candidates are exhausted.
    """
    for selector in selectors:
        try:
            element = await page.query_selector(selector)
        except Exception as e:
            logger.debug(f"Selector probe failed for {selector!r}: {e}")
            continue
        if element:
            logger.info(f"Found element with selector: {selector}")
            return element
    return None


async def find_role(page, role: str, selectors: Optional[Dict[str, List[str]]] = None) -> Optional[Any]:
    """Resolve a named role (see ROLE_SELECTORS) on the page"""
    table = selectors if selectors is not None else ROLE_SELECTORS
    return await find_first(page, table.get(role, []))
