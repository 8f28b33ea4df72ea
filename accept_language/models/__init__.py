"""Models package - domain types, configuration and exceptions."""

from .preferences import PreferenceEntry, PreferenceTable, Ranking

__all__ = [
    "PreferenceEntry",
    "PreferenceTable",
    "Ranking",
]
