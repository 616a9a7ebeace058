"""
findadoc_core - scrape a hospital "find a doctor" search and score result relevance
"""

from findadoc_core.config import Config, config
from findadoc_core.models import (
    SpecialtyConfig,
    RawProviderRecord,
    ClassifiedProvider,
    SearchResult,
    ProgressEvent,
)
from findadoc_core.specialties import SPECIALTIES, resolve
from findadoc_core.classifier import classify
from findadoc_core.dom_selectors import ROLE_SELECTORS, find_first, find_role
from findadoc_core.progress import ProgressChannel, ProgressReporter
from findadoc_core.browser_setup import BrowserLauncher, PlaywrightLauncher
from findadoc_core.driver import SearchDriver, SearchState, run_search
from findadoc_core.errors import (
    FindADocError,
    InvalidSpecialtyError,
    LaunchError,
    NavigationExhaustedError,
    RequiredFieldNotFoundError,
    SessionBusyError,
    ExtractionEmptyWarning,
)

__version__ = "1.0.0"

__all__ = [
    'Config',
    'config',
    'SpecialtyConfig',
    'RawProviderRecord',
    'ClassifiedProvider',
    'SearchResult',
    'ProgressEvent',
    'SPECIALTIES',
    'resolve',
    'classify',
    'ROLE_SELECTORS',
    'find_first',
    'find_role',
    'ProgressChannel',
    'ProgressReporter',
    'BrowserLauncher',
    'PlaywrightLauncher',
    'SearchDriver',
    'SearchState',
    'run_search',
    'FindADocError',
    'InvalidSpecialtyError',
    'LaunchError',
    'NavigationExhaustedError',
    'RequiredFieldNotFoundError',
    'SessionBusyError',
    'ExtractionEmptyWarning',
]
