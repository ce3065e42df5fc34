"""
Catalog rankers module initialization.

This module exports the concrete ranker for each catalog kind.
"""

from stackmatch.rankers.catalogs.agent_ranker import AgentRanker
from stackmatch.rankers.catalogs.team_ranker import TeamRanker
from stackmatch.rankers.catalogs.template_ranker import TemplateRanker

__all__ = [
    "AgentRanker",
    "TeamRanker",
    "TemplateRanker",
]
