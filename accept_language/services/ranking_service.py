"""
Service for ranking parsed language preferences.
"""

from collections.abc import Iterable

from accept_language.models.preferences import PreferenceEntry, Ranking


class PreferenceRankingService:
    """Splits preference entries into excluded and preferred ranges."""

    @staticmethod
    def rank(entries: Iterable[PreferenceEntry]) -> Ranking:
        """
        Rank preference entries.

        - Excluded: non-wildcard ranges with quality 0. "*;q=0" is not
          excluded here; it simply never enters the preferred list, which
          leaves every undeclared tag unmatched.
        - Preferred: entries with quality > 0, highest quality first, ties
          going to the earliest declaration.

        Args:
            entries: Entries of a preference table

        Returns:
            Ranking with the excluded set and the preferred tuple
        """
        excluded: set[str] = set()
        preferred: list[PreferenceEntry] = []

        for entry in entries:
            if entry.quality > 0:
                preferred.append(entry)
            elif not entry.is_wildcard:
                excluded.add(entry.language_range)

        preferred.sort(key=lambda entry: (-entry.quality, entry.index))
        return Ranking(excluded=frozenset(excluded), preferred=tuple(preferred))
