"""
Services layer for negotiation logic.

Parsing, ranking and matching are kept in separate services so each step
can be used and tested on its own.
"""

from .header_import_service import HeaderImportService
from .intersection_service import IntersectionService
from .matching_service import BasicFilteringService
from .ranking_service import PreferenceRankingService

__all__ = [
    "BasicFilteringService",
    "HeaderImportService",
    "IntersectionService",
    "PreferenceRankingService",
]
