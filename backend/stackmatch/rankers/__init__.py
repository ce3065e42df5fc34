"""
Rankers module initialization.

One ranker per catalog kind, built through RankerFactory.
"""

from stackmatch.rankers.base import BaseCatalogRanker, RankingLoggerProtocol
from stackmatch.rankers.catalogs import AgentRanker, TeamRanker, TemplateRanker
from stackmatch.rankers.kinds import AVAILABLE_KINDS, CatalogKind
from stackmatch.rankers.ranker_factory import RankerFactory

__all__ = [
    "AVAILABLE_KINDS",
    "AgentRanker",
    "BaseCatalogRanker",
    "CatalogKind",
    "RankerFactory",
    "RankingLoggerProtocol",
    "TeamRanker",
    "TemplateRanker",
]
