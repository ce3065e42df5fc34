"""
Agent Ranker.

Ranks the automation agent catalog. Agents are not capped: every agent
scoring at or above the recommendation threshold stays recommended.
"""

from typing import Optional

from stackmatch.rankers.base import BaseCatalogRanker
from stackmatch.rankers.kinds import CatalogKind


class AgentRanker(BaseCatalogRanker):
    """Ranker for automation agents (uncapped)."""

    KIND: CatalogKind = CatalogKind.AGENT
    DEFAULT_CAP: Optional[int] = None
