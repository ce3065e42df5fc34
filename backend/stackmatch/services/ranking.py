"""
Public ranking entry points.

One function per catalog kind, each a pure function of its arguments:

    rank_templates(catalog, project) -> list[ScoredItem]
    rank_agents(catalog, project) -> list[ScoredItem]
    rank_teams(catalog, project) -> list[ScoredItem]

The catalog is always passed in by the caller; nothing here loads or
caches catalog data.
"""

from typing import List, Optional, Sequence

from stackmatch.rankers.kinds import CatalogKind
from stackmatch.services.container import get_container
from stackmatch.skills.catalog_ranker import ScoredItem
from stackmatch.skills.relevance_scorer import CatalogItem, ScoringMode
from stackmatch.skills.tech_tag_mapper import ProjectProfile


def rank_catalog(
    kind: "CatalogKind | str",
    catalog: Sequence[CatalogItem],
    project: Optional[ProjectProfile],
    mode: "Optional[ScoringMode | str]" = None,
) -> List[ScoredItem]:
    """
    Rank a catalog of the given kind against a project.

    Args:
        kind: Catalog kind ('template', 'agent' or 'team').
        catalog: All items of that kind.
        project: The active project, or None.
        mode: Optional scoring mode override (default: improved).

    Raises:
        UnknownCatalogKindError: If kind is not a known catalog kind.
        ScoringConfigurationError: If mode is not a known regime.
    """
    ranker = get_container().ranker_factory.create(kind, mode=mode)
    return ranker.rank(catalog, project)


def rank_templates(
    catalog: Sequence[CatalogItem],
    project: Optional[ProjectProfile],
    mode: "Optional[ScoringMode | str]" = None,
) -> List[ScoredItem]:
    """Rank prompt templates (at most 5 recommended)."""
    return rank_catalog(CatalogKind.TEMPLATE, catalog, project, mode=mode)


def rank_agents(
    catalog: Sequence[CatalogItem],
    project: Optional[ProjectProfile],
    mode: "Optional[ScoringMode | str]" = None,
) -> List[ScoredItem]:
    """Rank automation agents (uncapped)."""
    return rank_catalog(CatalogKind.AGENT, catalog, project, mode=mode)


def rank_teams(
    catalog: Sequence[CatalogItem],
    project: Optional[ProjectProfile],
    mode: "Optional[ScoringMode | str]" = None,
) -> List[ScoredItem]:
    """Rank team compositions (at most 3 recommended)."""
    return rank_catalog(CatalogKind.TEAM, catalog, project, mode=mode)
