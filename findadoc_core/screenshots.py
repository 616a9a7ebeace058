"""
Screenshot utilities.

Debug captures of the results page, written as:
screenshots/
└── debug-TIMESTAMP.png
"""
from pathlib import Path
from datetime import datetime
from typing import Optional
import logging

logger = logging.getLogger(__name__)


async def take_debug_screenshot(page, target_dir: Path, label: str = "debug") -> Optional[str]:
    """Save a full-page screenshot; returns its path or None when it fails."""
    try:
        tdir = Path(target_dir)
        tdir.mkdir(parents=True, exist_ok=True)
        filename = tdir / f"{label}-{datetime.now().strftime('%Y%m%d-%H%M%S-%f')}.png"
        await page.screenshot(path=str(filename), full_page=True)
    except Exception as e:
        logger.warning(f"Could not save debug screenshot: {e}")
        return None
    logger.info(f"Screenshot saved to {filename}")
    return str(filename)
