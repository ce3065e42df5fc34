"""
Catalog Ranker - Implementation

Turns a catalog and a project into a display-ready ordering.
Pipeline:
1. Extract project tags once
2. Score every item in catalog order
3. Cap recommendations (highest scores kept, ties by catalog order)
4. Order for display: recommended by score desc, then the rest by name

Also provides pure views over a ranked list (suggestions, filters,
summary counts).
"""

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from stackmatch.skills.relevance_scorer import CatalogItem, RelevanceScorer
from stackmatch.skills.tech_tag_mapper import (
    ProjectProfile,
    TechTag,
    extract_project_tags,
)

from .definition import (
    SELECTION_ALL,
    SELECTION_RECOMMENDED,
    RankingPolicy,
    RankingSummary,
    ScoredItem,
)

logger = logging.getLogger(__name__)

DemotionCallback = Callable[[ScoredItem], None]

# Number of items the suggestion strip shows
DEFAULT_SUGGESTION_LIMIT = 4


def score_catalog(
    catalog: Sequence[CatalogItem],
    project_tags: Sequence[TechTag],
    scorer: RelevanceScorer,
) -> List[ScoredItem]:
    """Score every item independently, preserving catalog order."""
    scored: List[ScoredItem] = []
    for item in catalog:
        result = scorer.score(item, project_tags)
        scored.append(
            ScoredItem(
                item=item,
                score=result.score,
                is_recommended=result.is_recommended,
                matched_tags=result.matched_tags,
            )
        )
    return scored


def apply_recommendation_cap(
    scored: Sequence[ScoredItem],
    cap: Optional[int],
    on_demote: Optional[DemotionCallback] = None,
) -> List[ScoredItem]:
    """
    Keep at most ``cap`` items recommended.

    Items are walked by descending score (stable, so equal scores keep
    their catalog order). Once ``cap`` recommended items have been kept,
    every further recommended item is demoted; its score is unchanged.

    Args:
        scored: Scored items in catalog order.
        cap: Maximum recommended items, or None for no cap.
        on_demote: Optional callback invoked with each demoted item.

    Returns:
        Items sorted by descending score, with the cap applied.
    """
    by_score = sorted(scored, key=lambda s: -s.score)
    if cap is None:
        return by_score

    capped: List[ScoredItem] = []
    kept = 0
    for entry in by_score:
        if entry.is_recommended:
            if kept >= cap:
                entry = entry.demote()
                if on_demote is not None:
                    on_demote(entry)
            else:
                kept += 1
        capped.append(entry)

    return capped


def order_for_display(scored: Sequence[ScoredItem]) -> List[ScoredItem]:
    """
    Final display order.

    Recommended items first by descending score (ties keep their input
    order), then non-recommended items by ascending name.
    """
    recommended = [s for s in scored if s.is_recommended]
    others = [s for s in scored if not s.is_recommended]

    recommended.sort(key=lambda s: -s.score)
    others.sort(key=lambda s: s.item.name)

    return recommended + others


# ============================================================================
# CATALOG RANKER CLASS
# ============================================================================

class CatalogRanker:
    """
    Ranks a catalog of one kind against a project.

    Usage:
        ranker = CatalogRanker(RankingPolicy(recommendation_cap=3))
        ranked = ranker.rank(catalog, project)

        for entry in ranked:
            print(entry.item.name, entry.score, entry.is_recommended)

    Stateless: each call reads only its arguments and the policy.
    """

    def __init__(self, policy: Optional[RankingPolicy] = None):
        """
        Initialize the Catalog Ranker.

        Args:
            policy: Cap, scoring profile and scoring mode (default: uncapped,
                improved regime).
        """
        self.policy = policy or RankingPolicy()
        self._scorer = RelevanceScorer(
            profile=self.policy.scoring_profile,
            mode=self.policy.scoring_mode,
        )

    def rank(
        self,
        catalog: Sequence[CatalogItem],
        project: Optional[ProjectProfile],
        on_demote: Optional[DemotionCallback] = None,
    ) -> List[ScoredItem]:
        """
        Score, cap and order the full catalog.

        Args:
            catalog: All items of one kind.
            project: The active project, or None.
            on_demote: Optional callback invoked for items demoted by the cap.

        Returns:
            One ScoredItem per catalog item, in display order.
        """
        project_tags = extract_project_tags(project)
        return self.rank_with_tags(catalog, project_tags, on_demote=on_demote)

    def rank_with_tags(
        self,
        catalog: Sequence[CatalogItem],
        project_tags: Sequence[TechTag],
        on_demote: Optional[DemotionCallback] = None,
    ) -> List[ScoredItem]:
        """Same as rank(), for callers that already extracted project tags."""
        if not catalog:
            return []

        scored = score_catalog(catalog, project_tags, self._scorer)
        capped = apply_recommendation_cap(
            scored, self.policy.recommendation_cap, on_demote=on_demote
        )
        ranked = order_for_display(capped)

        logger.debug(
            f"Ranked {len(ranked)} items: "
            f"{sum(1 for s in ranked if s.is_recommended)} recommended"
        )
        return ranked


# ============================================================================
# VIEWS OVER A RANKED LIST
# ============================================================================

def suggest_items(
    ranked: Sequence[ScoredItem],
    exclude_names: Iterable[str] = (),
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> List[ScoredItem]:
    """
    Recommended items the user does not already have.

    Names in ``exclude_names`` are compared case-insensitively. Ranked
    order is preserved and at most ``limit`` items are returned.
    """
    existing = {name.lower() for name in exclude_names}
    suggestions = [
        s for s in ranked
        if s.is_recommended and s.item.name.lower() not in existing
    ]
    return suggestions[:max(limit, 0)]


def filter_ranked(
    ranked: Sequence[ScoredItem],
    selection: str = SELECTION_ALL,
    query: Optional[str] = None,
) -> List[ScoredItem]:
    """
    Filter a ranked list without changing its order.

    Args:
        ranked: Output of a ranking call.
        selection: "all", "recommended", or a category id.
        query: Case-insensitive substring matched on name or description.
    """
    results = list(ranked)

    if query and query.strip():
        needle = query.strip().lower()
        results = [
            s for s in results
            if needle in s.item.name.lower() or needle in s.item.description.lower()
        ]

    if selection == SELECTION_ALL:
        return results
    if selection == SELECTION_RECOMMENDED:
        return [s for s in results if s.is_recommended]
    return [s for s in results if s.item.category == selection]


def summarize_ranking(ranked: Sequence[ScoredItem]) -> RankingSummary:
    """Total, recommended and per-category counts."""
    by_category = {}
    for entry in ranked:
        if entry.item.category:
            by_category[entry.item.category] = by_category.get(entry.item.category, 0) + 1

    return RankingSummary(
        total=len(ranked),
        recommended=sum(1 for s in ranked if s.is_recommended),
        by_category=by_category,
    )
