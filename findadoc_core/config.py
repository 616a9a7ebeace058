#!/usr/bin/env python3
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ["true", "1", "yes"]


@dataclass
class Config:
    """Application configuration"""
    target_url: str = os.getenv("FINDADOC_TARGET_URL", "https://www.unchealth.org/care-services/doctors")

    # Browser acquisition: local Chromium, a specific Chrome binary, or a remote CDP endpoint
    headless: bool = _flag("FINDADOC_HEADLESS", "true")
    executable_path: Optional[str] = os.getenv("FINDADOC_CHROME_PATH") or None
    cdp_url: str = os.getenv("FINDADOC_CDP_URL", "http://localhost:9222")
    use_cdp: bool = _flag("FINDADOC_USE_CDP", "false")
    launch_timeout_ms: int = int(os.getenv("FINDADOC_LAUNCH_TIMEOUT_MS", "30000"))
    viewport_width: int = int(os.getenv("FINDADOC_VIEWPORT_WIDTH", "1920"))
    viewport_height: int = int(os.getenv("FINDADOC_VIEWPORT_HEIGHT", "1080"))

    # Navigation
    nav_timeout_ms: int = int(os.getenv("FINDADOC_NAV_TIMEOUT_MS", "30000"))
    nav_attempts: int = int(os.getenv("FINDADOC_NAV_ATTEMPTS", "3"))
    nav_backoff_s: float = float(os.getenv("FINDADOC_NAV_BACKOFF_S", "2"))
    wait_until: str = os.getenv("FINDADOC_WAIT_UNTIL", "networkidle")

    # Interaction pacing
    type_delay_ms: int = int(os.getenv("FINDADOC_TYPE_DELAY_MS", "100"))
    load_settle_ms: int = int(os.getenv("FINDADOC_LOAD_SETTLE_MS", "3000"))
    field_settle_ms: int = int(os.getenv("FINDADOC_FIELD_SETTLE_MS", "1000"))
    submit_settle_ms: int = int(os.getenv("FINDADOC_SUBMIT_SETTLE_MS", "5000"))
    page_settle_ms: int = int(os.getenv("FINDADOC_PAGE_SETTLE_MS", "3000"))
    action_timeout_ms: int = int(os.getenv("FINDADOC_ACTION_TIMEOUT_MS", "10000"))
    evaluate_timeout_s: float = float(os.getenv("FINDADOC_EVALUATE_TIMEOUT_S", "15"))

    # Pagination
    max_pages: int = int(os.getenv("FINDADOC_MAX_PAGES", "2"))

    # Debug output
    debug_screenshot: bool = _flag("FINDADOC_DEBUG_SCREENSHOT", "false")
    screenshot_dir: Path = Path(os.getenv("FINDADOC_SCREENSHOT_DIR", "./screenshots"))

    # Server
    api_port: int = int(os.getenv("FINDADOC_API_PORT", os.getenv("PORT", "3000")))
    log_level: str = os.getenv("FINDADOC_LOG_LEVEL", "INFO").upper()
    progress_keepalive_s: float = float(os.getenv("FINDADOC_PROGRESS_KEEPALIVE_S", "15"))

    @property
    def total_steps(self) -> int:
        """Progress steps in a full run: launch, navigate, fill, submit,
        extract/paginate per page, analyze, done."""
        return 5 + 2 * self.max_pages


# Global config instance
config = Config()
