"""
Relevance Scorer - Data Definitions

Pydantic models for tag-overlap relevance scoring.
Two regimes are supported: IMPROVED (match count + specificity bonus)
and LEGACY (match ratio).
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stackmatch.skills.tech_tag_mapper import TechTag


class ScoringMode(str, Enum):
    """
    Scoring regime selector.

    - IMPROVED: 30 base + 20 per match (cap 60) + 10 specificity bonus
    - LEGACY: 40 base + match ratio * 60
    """
    IMPROVED = "improved"
    LEGACY = "legacy"

    @classmethod
    def parse(cls, value: "ScoringMode | str") -> "ScoringMode":
        """Resolve an enum member or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnknownScoringModeError(value) from None


class ScoringProfile(BaseModel):
    """
    Constant bundle for one catalog kind.

    The defaults reproduce the scoring used by every built-in kind.
    """

    model_config = ConfigDict(frozen=True)

    universal_score: int = Field(default=75, ge=0, le=100)
    base_score: int = Field(default=30, ge=0, le=100)
    per_match_bonus: int = Field(default=20, ge=0)
    match_bonus_cap: int = Field(default=60, ge=0)
    specificity_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Minimum matched/declared tag ratio for the specificity bonus."
    )
    specificity_bonus: int = Field(default=10, ge=0)
    recommend_threshold: int = Field(default=50, ge=0, le=100)
    max_score: int = Field(default=100, ge=0, le=100)

    legacy_universal_score: int = Field(default=60, ge=0, le=100)
    legacy_base_score: int = Field(default=40, ge=0, le=100)
    legacy_ratio_weight: int = Field(default=60, ge=0, le=100)


class CatalogItem(BaseModel):
    """
    One recommendable catalog entry (template, agent or team).

    Only ``tags`` and ``name`` take part in ranking; ``payload`` carries
    kind-specific data untouched.
    """

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., min_length=1, description="Stable unique identifier.")
    name: str = Field(..., description="Display name, used for alphabetical ordering.")
    description: str = Field(default="")
    category: Optional[str] = Field(default=None)
    tags: List[TechTag] = Field(default_factory=list)
    payload: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: List[TechTag]) -> List[TechTag]:
        """Collapse duplicate tags, keeping the first occurrence."""
        return list(dict.fromkeys(v))

    @property
    def is_universal(self) -> bool:
        return TechTag.UNIVERSAL in self.tags


class RelevanceResult(BaseModel):
    """Score, recommendation flag and matched tags for one item."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    is_recommended: bool = Field(default=False)
    matched_tags: List[TechTag] = Field(default_factory=list)


# Custom Exceptions

class ScorerError(Exception):
    """Excepción base para errores del scorer."""
    pass


class UnknownScoringModeError(ScorerError):
    """El modo de scoring no existe."""
    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(
            f"Unknown scoring mode '{mode}'. "
            f"Expected one of: {[m.value for m in ScoringMode]}"
        )
