"""
Base rankers module initialization.

This module exports the base ranker class and the logger protocol
used for dependency injection.
"""

from stackmatch.rankers.base.base_ranker import (
    USE_DEFAULT_CAP,
    BaseCatalogRanker,
    RankingLoggerProtocol,
)

__all__ = [
    "BaseCatalogRanker",
    "RankingLoggerProtocol",
    "USE_DEFAULT_CAP",
]
