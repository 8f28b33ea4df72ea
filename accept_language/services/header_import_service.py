"""
Service for importing Accept-Language header values.

Parsing is deliberately lenient: real-world headers are often malformed,
so any entry that does not follow the grammar is dropped and parsing goes
on with the next one. Only a wrong argument type is reported.
"""

import re

from loguru import logger

from accept_language.helpers.language_range import is_valid_range
from accept_language.helpers.quality_value import MAX_QUALITY, parse_quality
from accept_language.models.config import get_settings
from accept_language.models.exceptions import InvalidHeaderTypeException
from accept_language.models.preferences import PreferenceEntry, PreferenceTable

_QUALITY_MARKER = re.compile(r";q=", re.IGNORECASE)


class HeaderImportService:
    """Builds preference tables from raw header values."""

    @staticmethod
    def import_header(
        raw_input: str | None,
        *,
        allow_leading_dot: bool | None = None,
    ) -> PreferenceTable:
        """
        Parse an Accept-Language header value into a preference table.

        Handles formats like:
        - "da, en-GB;q=0.8, en;q=0.7"
        - "de-LU, *;q=0.5, en;q=0"
        - None or "" (empty table)

        When a range is declared more than once, the last quality wins but
        the entry keeps the position of its first occurrence.

        Args:
            raw_input: Header value, or None when no header was sent
            allow_leading_dot: Accept ".8" quality shorthand; defaults to
                the ALLOW_LEADING_DOT_QVALUE setting

        Returns:
            Immutable, ranked preference table

        Raises:
            InvalidHeaderTypeException: If raw_input is neither str nor None
        """
        if raw_input is not None and not isinstance(raw_input, str):
            raise InvalidHeaderTypeException(
                f"Accept-Language value must be a string or None, "
                f"not {type(raw_input).__name__}"
            )
        if allow_leading_dot is None:
            allow_leading_dot = get_settings().ALLOW_LEADING_DOT_QVALUE

        qualities: dict[str, int] = {}
        positions: dict[str, int] = {}

        # Whitespace is insignificant anywhere in the value
        compact = "".join((raw_input or "").split())
        candidates = [part for part in compact.split(",") if part]
        for position, candidate in enumerate(candidates):
            parsed = HeaderImportService._parse_entry(candidate, allow_leading_dot)
            if parsed is None:
                continue

            language_range, quality = parsed
            qualities[language_range] = quality
            positions.setdefault(language_range, position)

        entries = tuple(
            PreferenceEntry(
                language_range=language_range,
                quality=quality,
                index=positions[language_range],
            )
            for language_range, quality in qualities.items()
        )
        return PreferenceTable(entries=entries)

    @staticmethod
    def _parse_entry(candidate: str, allow_leading_dot: bool) -> tuple[str, int] | None:
        """Parse one "range[;q=value]" entry, or None if it must be dropped."""
        parts = _QUALITY_MARKER.split(candidate)
        if len(parts) > 2:
            logger.debug(f"Dropping entry with repeated quality marker: {candidate!r}")
            return None

        language_range = parts[0]
        if not is_valid_range(language_range):
            logger.debug(f"Dropping entry with invalid language range: {candidate!r}")
            return None

        if len(parts) == 1:
            return language_range.lower(), MAX_QUALITY

        quality = parse_quality(parts[1], allow_leading_dot=allow_leading_dot)
        if quality is None:
            logger.debug(f"Dropping entry with invalid quality value: {candidate!r}")
            return None

        return language_range.lower(), quality
