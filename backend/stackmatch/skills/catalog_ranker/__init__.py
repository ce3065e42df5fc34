"""
Catalog Ranker Skill

Scores a full catalog against a project, caps the number of
recommended items and produces a stable display order.
"""

from .definition import (
    SELECTION_ALL,
    SELECTION_RECOMMENDED,
    STRONG_MATCH_SCORE,
    RankingPolicy,
    RankingSummary,
    ScoredItem,
)

from .impl import (
    DEFAULT_SUGGESTION_LIMIT,
    CatalogRanker,
    apply_recommendation_cap,
    filter_ranked,
    order_for_display,
    score_catalog,
    suggest_items,
    summarize_ranking,
)

__all__ = [
    # Classes
    "CatalogRanker",
    # Models
    "RankingPolicy",
    "RankingSummary",
    "ScoredItem",
    # Functions
    "apply_recommendation_cap",
    "filter_ranked",
    "order_for_display",
    "score_catalog",
    "suggest_items",
    "summarize_ranking",
    # Constants
    "DEFAULT_SUGGESTION_LIMIT",
    "SELECTION_ALL",
    "SELECTION_RECOMMENDED",
    "STRONG_MATCH_SCORE",
]
