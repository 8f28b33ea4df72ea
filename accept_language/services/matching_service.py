"""
Service for RFC 4647 Basic Filtering of available language tags.
"""

from collections.abc import Iterable

from loguru import logger

from accept_language.helpers.language_range import prefix_match, primary_subtag
from accept_language.models.exceptions import InvalidLanguageTagException
from accept_language.models.preferences import PreferenceEntry


class BasicFilteringService:
    """Matches ranked preferences against the tags an application serves."""

    @staticmethod
    def match(
        excluded: frozenset[str],
        preferred: tuple[PreferenceEntry, ...],
        available_tags: Iterable[str],
        *,
        primary_fallback: bool = False,
    ) -> str | None:
        """
        Find the best available tag.

        1. Tags matched by an excluded range are dropped ("en;q=0" also
           drops "en-GB", but not "eng").
        2. Preferred entries are tried in ranked order. A specific range
           returns the first tag it matches. The wildcard returns the first
           tag not matched by any other preferred range, whatever that
           range's quality.

        Args:
            excluded: Ranges declared with quality 0
            preferred: Ranked entries with quality > 0
            available_tags: Tags the application can serve, any case
            primary_fallback: Let a range like "zh-tw" match a tag equal to
                its primary subtag ("zh") when nothing else matches it

        Returns:
            The matching tag exactly as supplied, or None

        Raises:
            InvalidLanguageTagException: If available_tags is a bare string,
                not iterable, or holds a non-string element
        """
        tags = BasicFilteringService._validate_tags(available_tags)

        candidates = [
            tag for tag in tags if not any(prefix_match(r, tag) for r in excluded)
        ]
        if not candidates:
            return None

        specific_ranges = [
            entry.language_range for entry in preferred if not entry.is_wildcard
        ]

        for entry in preferred:
            if entry.is_wildcard:
                found = BasicFilteringService._find_unclaimed(
                    candidates, specific_ranges
                )
            else:
                found = BasicFilteringService._find_matching(
                    candidates, entry.language_range, primary_fallback
                )
            if found is not None:
                logger.debug(f"Range {entry.language_range!r} matched tag {found!r}")
                return found

        return None

    @staticmethod
    def _validate_tags(available_tags: Iterable[str]) -> list[str]:
        if isinstance(available_tags, str):
            raise InvalidLanguageTagException(
                "Available tags must be a collection of strings, not a single string"
            )
        try:
            tags = list(available_tags)
        except TypeError as e:
            raise InvalidLanguageTagException(
                f"Available tags must be iterable, not {type(available_tags).__name__}"
            ) from e

        for tag in tags:
            if not isinstance(tag, str):
                raise InvalidLanguageTagException(
                    f"Language tags must be strings, not {type(tag).__name__}"
                )
        return tags

    @staticmethod
    def _find_matching(
        candidates: list[str], language_range: str, primary_fallback: bool
    ) -> str | None:
        for tag in candidates:
            if prefix_match(language_range, tag):
                return tag

        if primary_fallback:
            primary = primary_subtag(language_range)
            if primary != language_range:
                for tag in candidates:
                    if tag.lower() == primary:
                        return tag

        return None

    @staticmethod
    def _find_unclaimed(
        candidates: list[str], specific_ranges: list[str]
    ) -> str | None:
        for tag in candidates:
            if not any(prefix_match(r, tag) for r in specific_ranges):
                return tag
        return None
