"""
Retry Logic for Page Navigation

Usage:
    from findadoc_core.retry import navigate_with_retry

    await navigate_with_retry(page, url, timeout=30000, max_attempts=3)
"""

import asyncio
import logging

from .errors import NavigationExhaustedError

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """Network-related error (timeout, server error, etc.)"""
    pass


async def navigate_with_retry(
    page,
    url: str,
    timeout: int = 30000,
    wait_until: str = "networkidle",
    max_attempts: int = 3,
    backoff: float = 2.0,
) -> bool:
    """
    Navigate to URL, retrying with a fixed backoff.

    Args:
        page: Playwright page object
        url: URL to navigate to
        timeout: Per-attempt navigation timeout in milliseconds
        wait_until: Wait condition ('load', 'domcontentloaded', 'networkidle')
        max_attempts: Maximum number of attempts
        backoff: Seconds to wait between attempts

    Returns:
        True if navigation succeeded

    Raises:
        NavigationExhaustedError: If every attempt fails
    """
    last_error = None

    for attempt in range(1, max_attempts + 1):
        try:
            response = await page.goto(url, timeout=timeout, wait_until=wait_until)
            if response is not None and response.status >= 500:
                raise NetworkError(f"Server error: {response.status}")
            logger.debug(f"Navigation to {url} succeeded on attempt {attempt}")
            return True

        except Exception as e:
            last_error = e
            if attempt < max_attempts:
                logger.warning(
                    f"Navigation attempt {attempt}/{max_attempts} failed: {e}. "
                    f"Retrying in {backoff:.1f}s..."
                )
                await asyncio.sleep(backoff)
            else:
                logger.error(f"Navigation failed after {max_attempts} attempts: {e}")

    raise NavigationExhaustedError(url, max_attempts, last_error)
