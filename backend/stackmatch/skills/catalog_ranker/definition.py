"""
Catalog Ranker - Data Definitions

Pydantic models for ranking a catalog against a project:
the ranking policy, the annotated result rows and a summary view.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from stackmatch.skills.relevance_scorer import (
    DEFAULT_SCORING_PROFILE,
    CatalogItem,
    ScoringMode,
    ScoringProfile,
)
from stackmatch.skills.tech_tag_mapper import TechTag

# Score from which the UI shows a "strong match" badge
STRONG_MATCH_SCORE = 80

# Selection values understood by filter_ranked besides category ids
SELECTION_ALL = "all"
SELECTION_RECOMMENDED = "recommended"


class RankingPolicy(BaseModel):
    """
    How one catalog kind is ranked.

    ``recommendation_cap`` of None means uncapped.
    """

    model_config = ConfigDict(frozen=True)

    recommendation_cap: Optional[int] = Field(
        default=None,
        ge=0,
        description="Maximum number of items left recommended after capping."
    )

    scoring_profile: ScoringProfile = Field(default=DEFAULT_SCORING_PROFILE)

    scoring_mode: ScoringMode = Field(default=ScoringMode.IMPROVED)


class ScoredItem(BaseModel):
    """
    A catalog item annotated with its relevance for one project.

    Ephemeral: rebuilt on every ranking call.
    """

    model_config = ConfigDict(frozen=True)

    item: CatalogItem
    score: int = Field(..., ge=0, le=100)
    is_recommended: bool = Field(default=False)
    matched_tags: List[TechTag] = Field(default_factory=list)

    @property
    def is_strong_match(self) -> bool:
        return self.score >= STRONG_MATCH_SCORE

    def demote(self) -> "ScoredItem":
        """Copy with the recommendation flag cleared; score is unchanged."""
        return self.model_copy(update={"is_recommended": False})


class RankingSummary(BaseModel):
    """Counts over a ranked list, for filter bars."""

    total: int = Field(default=0, ge=0)
    recommended: int = Field(default=0, ge=0)
    by_category: Dict[str, int] = Field(default_factory=dict)
