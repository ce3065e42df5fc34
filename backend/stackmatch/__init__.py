"""
StackMatch: tech-stack relevance scoring and ranking for catalog items.

Scores prompt templates, automation agents and team compositions against a
project's technology stack, caps how many are recommended per kind and
returns a stable display order. Every call is a pure function of its
arguments; catalogs are supplied by the caller.

Example::

    from stackmatch import CatalogItem, ProjectProfile, rank_templates

    project = ProjectProfile(language="TypeScript", framework="Next.js")
    ranked = rank_templates(catalog, project)
"""

from stackmatch.rankers import CatalogKind
from stackmatch.services import rank_agents, rank_catalog, rank_teams, rank_templates
from stackmatch.skills.catalog_ranker import ScoredItem
from stackmatch.skills.relevance_scorer import CatalogItem, ScoringMode
from stackmatch.skills.tech_tag_mapper import (
    ProjectProfile,
    StackExtras,
    TechTag,
    extract_project_tags,
)

__all__ = [
    "CatalogItem",
    "CatalogKind",
    "ProjectProfile",
    "ScoredItem",
    "ScoringMode",
    "StackExtras",
    "TechTag",
    "extract_project_tags",
    "rank_agents",
    "rank_catalog",
    "rank_teams",
    "rank_templates",
]
