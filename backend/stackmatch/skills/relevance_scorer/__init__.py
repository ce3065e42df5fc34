"""
Relevance Scorer Skill

Tag-overlap relevance scoring for catalog items.
Supports the improved (default) and legacy scoring regimes.
"""

from .definition import (
    CatalogItem,
    RelevanceResult,
    ScorerError,
    ScoringMode,
    ScoringProfile,
    UnknownScoringModeError,
)

from .impl import (
    DEFAULT_SCORING_PROFILE,
    RelevanceScorer,
    score_relevance,
    score_relevance_legacy,
)

__all__ = [
    # Classes
    "RelevanceScorer",
    # Models
    "CatalogItem",
    "RelevanceResult",
    "ScoringMode",
    "ScoringProfile",
    # Exceptions
    "ScorerError",
    "UnknownScoringModeError",
    # Functions
    "score_relevance",
    "score_relevance_legacy",
    # Constants
    "DEFAULT_SCORING_PROFILE",
]
