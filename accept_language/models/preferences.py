"""
Preference table domain types.

A PreferenceTable is built once per header value by the header import service
and is read-only afterwards, so a single table can be matched against any
number of tag lists, from any number of threads.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from accept_language.helpers.language_range import WILDCARD
from accept_language.helpers.quality_value import MAX_QUALITY
from accept_language.models.config import get_settings


@dataclass(frozen=True)
class PreferenceEntry:
    """One language range declared in the header."""

    language_range: str  # lowercased
    quality: int  # 0-1000
    index: int  # position of first occurrence, for tie-breaks

    @property
    def is_wildcard(self) -> bool:
        return self.language_range == WILDCARD


@dataclass(frozen=True)
class Ranking:
    """Ranges split into the excluded set and the ordered preferred list."""

    excluded: frozenset[str] = frozenset()
    preferred: tuple[PreferenceEntry, ...] = ()


@dataclass(frozen=True)
class PreferenceTable:
    """
    Parsed Accept-Language preferences.

    Attributes:
        entries: Entries in declaration order, one per distinct range.
        ranking: Excluded ranges and quality-ordered preferred entries,
            derived from entries on construction.
    """

    entries: tuple[PreferenceEntry, ...] = ()
    ranking: Ranking = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        from accept_language.services.ranking_service import PreferenceRankingService

        entries = tuple(self.entries)
        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "ranking", PreferenceRankingService.rank(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PreferenceEntry]:
        return iter(self.entries)

    def __contains__(self, language_range: object) -> bool:
        return self.quality(language_range) is not None

    @property
    def excluded(self) -> frozenset[str]:
        return self.ranking.excluded

    @property
    def preferred(self) -> tuple[PreferenceEntry, ...]:
        return self.ranking.preferred

    @property
    def languages_range(self) -> dict[str, float]:
        """Range to quality (0.0-1.0) mapping, in declaration order."""
        return {
            entry.language_range: entry.quality / MAX_QUALITY for entry in self.entries
        }

    def quality(self, language_range: object) -> int | None:
        """Return the declared quality of a range, or None if not declared."""
        if not isinstance(language_range, str):
            return None
        wanted = language_range.lower()
        for entry in self.entries:
            if entry.language_range == wanted:
                return entry.quality
        return None

    def match(
        self,
        available_tags: Iterable[str],
        *,
        primary_fallback: bool | None = None,
    ) -> str | None:
        """
        Find the best available tag for these preferences.

        Args:
            available_tags: Language tags the application can serve
            primary_fallback: Let "zh-TW" fall back to an available "zh";
                defaults to the PRIMARY_FALLBACK setting

        Returns:
            The matching element of available_tags, unchanged, or None

        Raises:
            InvalidLanguageTagException: If available_tags is not a
                collection of strings
        """
        from accept_language.services.matching_service import BasicFilteringService

        if primary_fallback is None:
            primary_fallback = get_settings().PRIMARY_FALLBACK

        return BasicFilteringService.match(
            self.excluded,
            self.preferred,
            available_tags,
            primary_fallback=primary_fallback,
        )
