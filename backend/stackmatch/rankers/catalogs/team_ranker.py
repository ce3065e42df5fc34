"""
Team Ranker.

Ranks multi-agent team compositions. At most three teams are
recommended at once.
"""

from typing import Optional

from stackmatch.rankers.base import BaseCatalogRanker
from stackmatch.rankers.kinds import CatalogKind


class TeamRanker(BaseCatalogRanker):
    """Ranker for multi-agent team compositions (cap: 3)."""

    KIND: CatalogKind = CatalogKind.TEAM
    DEFAULT_CAP: Optional[int] = 3
