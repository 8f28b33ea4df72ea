"""
Accept-Language negotiation.

Parses an Accept-Language header value once and matches it against the
language tags an application supports, using RFC 4647 Basic Filtering.

    >>> parse("da, en-GB;q=0.8, en;q=0.7").match(["en", "en-GB"])
    'en-GB'
"""

from loguru import logger

from accept_language.core.logging_config import (
    LIBRARY_NAME,
    configure_logging,
    reset_logging,
)
from accept_language.models.config import Settings, get_settings
from accept_language.models.exceptions import (
    DomainException,
    InvalidHeaderTypeException,
    InvalidLanguageTagException,
    ValidationException,
)
from accept_language.models.preferences import PreferenceEntry, PreferenceTable
from accept_language.services.header_import_service import HeaderImportService
from accept_language.services.intersection_service import IntersectionService

__version__ = "1.0.0"

# Libraries stay quiet unless the application opts in
logger.disable(LIBRARY_NAME)


def parse(raw_input: str | None) -> PreferenceTable:
    """
    Parse an Accept-Language header value.

    Args:
        raw_input: Header value, or None when the header is absent

    Returns:
        Immutable preference table; call .match() on it

    Raises:
        InvalidHeaderTypeException: If raw_input is neither str nor None
    """
    return HeaderImportService.import_header(raw_input)


def intersection(
    raw_input: str | None,
    default_supported: str,
    *other_supported: str,
    two_letter_truncate: bool = True,
) -> str | None:
    """Two-letter truncating intersection; see IntersectionService."""
    return IntersectionService.intersect(
        raw_input,
        default_supported,
        *other_supported,
        two_letter_truncate=two_letter_truncate,
    )


__all__ = [
    "DomainException",
    "InvalidHeaderTypeException",
    "InvalidLanguageTagException",
    "PreferenceEntry",
    "PreferenceTable",
    "Settings",
    "ValidationException",
    "configure_logging",
    "get_settings",
    "intersection",
    "parse",
    "reset_logging",
]
