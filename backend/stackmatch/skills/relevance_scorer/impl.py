"""
Relevance Scorer - Implementation

Deterministic tag-overlap scoring with:
- Universal items short-circuiting to a fixed score
- Match-count bonus capped at three matches
- Specificity bonus for focused items (>= 50% of their tags matched)
- Legacy ratio-based regime kept selectable

Score outcomes (improved regime, default profile):
- 0 matches: 0 (not recommended)
- 1 match, low specificity: 50 (borderline recommended)
- 1 match, high specificity: 60
- 2 matches: 70-80
- 3+ matches: 90-100
- universal: 75 (ranks with 2-match items)
"""

import logging
import math
from typing import List, Sequence

from stackmatch.skills.tech_tag_mapper import TechTag

from .definition import (
    CatalogItem,
    RelevanceResult,
    ScoringMode,
    ScoringProfile,
)

logger = logging.getLogger(__name__)


DEFAULT_SCORING_PROFILE = ScoringProfile()


def _matched_tags(item: CatalogItem, project_tags: Sequence[TechTag]) -> List[TechTag]:
    """Intersection of item and project tags, in the item's own tag order."""
    # Enum members hash by name, so compare by equality rather than through a set
    project = list(project_tags)
    return [tag for tag in item.tags if tag in project]


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 72.5 must become 73
    return int(math.floor(value + 0.5))


def score_relevance(
    item: CatalogItem,
    project_tags: Sequence[TechTag],
    profile: ScoringProfile = DEFAULT_SCORING_PROFILE,
) -> RelevanceResult:
    """
    Score an item with the improved regime.

    Args:
        item: Catalog item whose declared tags are compared.
        project_tags: Canonical tags extracted from the project.
        profile: Constant bundle for the item's catalog kind.

    Returns:
        RelevanceResult with score in [0, 100].
    """
    if item.is_universal:
        return RelevanceResult(
            score=profile.universal_score,
            is_recommended=profile.universal_score >= profile.recommend_threshold,
            matched_tags=[TechTag.UNIVERSAL],
        )

    matched = _matched_tags(item, project_tags)
    if not matched:
        return RelevanceResult(score=0, is_recommended=False, matched_tags=[])

    match_bonus = min(len(matched) * profile.per_match_bonus, profile.match_bonus_cap)
    match_ratio = len(matched) / len(item.tags)
    specificity_bonus = (
        profile.specificity_bonus
        if match_ratio >= profile.specificity_threshold
        else 0
    )

    score = min(profile.base_score + match_bonus + specificity_bonus, profile.max_score)

    return RelevanceResult(
        score=score,
        is_recommended=score >= profile.recommend_threshold,
        matched_tags=matched,
    )


def score_relevance_legacy(
    item: CatalogItem,
    project_tags: Sequence[TechTag],
    profile: ScoringProfile = DEFAULT_SCORING_PROFILE,
) -> RelevanceResult:
    """
    Score an item with the legacy ratio regime.

    universal -> 60; no match -> 0; otherwise round(40 + ratio * 60).
    """
    if item.is_universal:
        return RelevanceResult(
            score=profile.legacy_universal_score,
            is_recommended=profile.legacy_universal_score >= profile.recommend_threshold,
            matched_tags=[TechTag.UNIVERSAL],
        )

    matched = _matched_tags(item, project_tags)
    if not matched:
        return RelevanceResult(score=0, is_recommended=False, matched_tags=[])

    match_ratio = len(matched) / len(item.tags)
    score = min(
        _round_half_up(profile.legacy_base_score + match_ratio * profile.legacy_ratio_weight),
        profile.max_score,
    )

    return RelevanceResult(
        score=score,
        is_recommended=score >= profile.recommend_threshold,
        matched_tags=matched,
    )


# ============================================================================
# RELEVANCE SCORER CLASS
# ============================================================================

class RelevanceScorer:
    """
    Scores catalog items against a project's tag set.

    Usage:
        scorer = RelevanceScorer(mode=ScoringMode.IMPROVED)
        result = scorer.score(item, ["typescript", "react"])
        print(result.score, result.is_recommended, result.matched_tags)

    The scorer is total: it never raises for empty item or project tags.
    """

    def __init__(
        self,
        profile: ScoringProfile = DEFAULT_SCORING_PROFILE,
        mode: "ScoringMode | str" = ScoringMode.IMPROVED,
    ):
        """
        Initialize the scorer.

        Args:
            profile: Kind-specific scoring constants.
            mode: Regime to apply (default: IMPROVED).

        Raises:
            UnknownScoringModeError: If mode is not a known regime.
        """
        self.profile = profile
        self.mode = ScoringMode.parse(mode)

    def score(
        self,
        item: CatalogItem,
        project_tags: Sequence[TechTag],
    ) -> RelevanceResult:
        """Score one item with the configured regime."""
        if self.mode is ScoringMode.LEGACY:
            result = score_relevance_legacy(item, project_tags, self.profile)
        else:
            result = score_relevance(item, project_tags, self.profile)

        logger.debug(
            f"Scored '{item.slug}' ({self.mode.value}): {result.score} "
            f"matched={[t.value for t in result.matched_tags]}"
        )
        return result
