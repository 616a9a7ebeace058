"""
Error taxonomy for search runs.

Each fatal error carries the HTTP status the API layer answers with, so the
request boundary can turn any failure into a single error message.
"""

from typing import Dict, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class FindADocError(Exception):
    """Base class for fatal search errors"""
    status_code = 500


class InvalidSpecialtyError(FindADocError):
    """Unknown specialty name or empty custom term list"""
    status_code = 400


class LaunchError(FindADocError):
    """Headless browser could not be started or reached"""


class NavigationExhaustedError(FindADocError):
    """Every navigation attempt failed"""

    def __init__(self, url: str, attempts: int, last_error: Optional[BaseException] = None):
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Navigation to {url} failed after {attempts} attempts: {last_error}"
        )


class RequiredFieldNotFoundError(FindADocError):
    """A form field the flow cannot continue without is missing"""

    def __init__(self, role: str, message: Optional[str] = None):
        self.role = role
        super().__init__(message or f"Could not find {role} field on the page")


class SessionBusyError(FindADocError):
    """A progress session id already has a run in flight"""
    status_code = 409

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session {session_id} already has a run in progress")


class ExtractionEmptyWarning(UserWarning):
    """Zero provider records were extracted; reported, never raised"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or (
            "No providers were found. The search may have returned no results, "
            "the page structure may have changed, or results may not have "
            "finished loading."
        ))


def error_response(error: BaseException) -> Tuple[Dict[str, str], int]:
    """
    Convert an exception into the API error payload and HTTP status.

    Client errors (4xx) are returned verbatim; everything else is reported
    as a failed test run with 500.
    """
    status = getattr(error, "status_code", 500)
    if status < 500:
        return {"error": str(error)}, status

    logger.debug(f"Mapped {type(error).__name__} to HTTP {status}")
    return {"error": f"Failed to run test: {error}"}, status
