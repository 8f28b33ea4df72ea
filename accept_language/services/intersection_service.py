"""
Truncating intersection: an alternate, non-RFC 4647 matching strategy.

Kept for applications that only deal in two-letter language codes. Ranges
and supported languages are cut to their first two characters and compared
for equality, so "en-gb" is served by "en" and "en-US" by "en". This is not
Basic Filtering and does not share its guarantees; prefer
PreferenceTable.match unless two-letter codes are all you have.
"""

from loguru import logger

from accept_language.helpers.language_range import prefix_match
from accept_language.models.exceptions import InvalidLanguageTagException
from accept_language.services.header_import_service import HeaderImportService

TRUNCATE_LENGTH = 2


class IntersectionService:
    """Finds the first accepted language that the application supports."""

    @staticmethod
    def intersect(
        raw_input: str | None,
        default_supported: str,
        *other_supported: str,
        two_letter_truncate: bool = True,
    ) -> str | None:
        """
        Intersect an Accept-Language value with the supported languages.

        Accepted ranges are walked by descending quality. A wildcard yields
        the default supported language unless that language was declared
        unacceptable ("fr;q=0"). Otherwise the first range found among the
        supported languages is returned, lowercased. Exclusions are matched
        untruncated, so "en-gb;q=0" does not reject a plain "en".

        Args:
            raw_input: Header value, or None
            default_supported: Language served for a wildcard
            *other_supported: Further supported languages
            two_letter_truncate: Compare only the first two characters

        Returns:
            Lowercased language code, or None if nothing is acceptable

        Raises:
            InvalidHeaderTypeException: If raw_input is neither str nor None
            InvalidLanguageTagException: If a supported language is not a str
        """
        for language in (default_supported, *other_supported):
            if not isinstance(language, str):
                raise InvalidLanguageTagException(
                    f"Supported languages must be strings, not {type(language).__name__}"
                )

        def cut(value: str) -> str:
            value = value.lower()
            return value[:TRUNCATE_LENGTH] if two_letter_truncate else value

        table = HeaderImportService.import_header(raw_input)

        def is_excluded(value: str) -> bool:
            # Exclusions stay untruncated: "en-gb;q=0" must not ban "en"
            return any(prefix_match(r, value) for r in table.excluded)

        default = cut(default_supported)
        supported = {default} | {cut(language) for language in other_supported}

        for entry in table.preferred:
            if entry.is_wildcard:
                if is_excluded(default_supported):
                    continue
                logger.debug(f"Wildcard accepted, serving default {default!r}")
                return default

            accepted = cut(entry.language_range)
            if accepted in supported and not is_excluded(entry.language_range):
                return accepted

        return None
