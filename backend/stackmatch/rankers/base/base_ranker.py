"""
Base class for catalog-kind rankers.

Each catalog kind (templates, agents, teams) ranks with the same pipeline
and differs only in its constants: the recommendation cap and the scoring
profile. Concrete rankers override those class attributes; the base class
wires them into the CatalogRanker skill and handles tracing.

Example:
    class TeamRanker(BaseCatalogRanker):
        KIND = CatalogKind.TEAM
        DEFAULT_CAP = 3
"""

from typing import List, Optional, Protocol, Sequence, runtime_checkable

from stackmatch.core.exceptions import ScoringConfigurationError
from stackmatch.rankers.kinds import CatalogKind
from stackmatch.skills.catalog_ranker import CatalogRanker, RankingPolicy, ScoredItem
from stackmatch.skills.relevance_scorer import (
    DEFAULT_SCORING_PROFILE,
    CatalogItem,
    ScoringMode,
    ScoringProfile,
    UnknownScoringModeError,
)
from stackmatch.skills.tech_tag_mapper import ProjectProfile, extract_project_tags


# =============================================================================
# PROTOCOLS (For Dependency Injection)
# =============================================================================


@runtime_checkable
class RankingLoggerProtocol(Protocol):
    """
    Protocol defining the interface for ranking loggers.

    Allows injection of custom loggers (or mocks in tests).
    """

    def ranking_start(self, kind: str, catalog_size: int, project_tags: list) -> None:
        ...

    def ranking_end(self, kind: str, ranked: list) -> None:
        ...

    def demoted(self, kind: str, slug: str, score: int, cap: int) -> None:
        ...


# Marker for "use the kind's own cap" (None already means uncapped)
USE_DEFAULT_CAP = object()


# =============================================================================
# BASE RANKER CLASS
# =============================================================================


class BaseCatalogRanker:
    """
    Ranker for one catalog kind.

    Attributes:
        KIND: The catalog kind this ranker handles (override in subclass).
        DEFAULT_CAP: Recommendation cap, None for uncapped (override in subclass).
        SCORING_PROFILE: Scoring constants for the kind.
    """

    KIND: CatalogKind = CatalogKind.TEMPLATE
    DEFAULT_CAP: Optional[int] = None
    SCORING_PROFILE: ScoringProfile = DEFAULT_SCORING_PROFILE

    def __init__(
        self,
        mode: "ScoringMode | str" = ScoringMode.IMPROVED,
        cap: "Optional[int] | object" = USE_DEFAULT_CAP,
        logger: Optional[RankingLoggerProtocol] = None,
    ) -> None:
        """
        Initialize the ranker.

        Args:
            mode: Scoring regime (enum member or 'improved' / 'legacy').
            cap: Recommendation cap override; None disables capping.
            logger: Optional logger implementing RankingLoggerProtocol.

        Raises:
            ScoringConfigurationError: If mode is not a known regime.
        """
        try:
            scoring_mode = ScoringMode.parse(mode)
        except UnknownScoringModeError as e:
            raise ScoringConfigurationError(mode, details=str(e)) from e

        self._cap: Optional[int] = self.DEFAULT_CAP if cap is USE_DEFAULT_CAP else cap
        self._logger = logger
        self._ranker = CatalogRanker(
            RankingPolicy(
                recommendation_cap=self._cap,
                scoring_profile=self.SCORING_PROFILE,
                scoring_mode=scoring_mode,
            )
        )

    @property
    def kind(self) -> CatalogKind:
        """Return the catalog kind this ranker handles."""
        return self.KIND

    @property
    def recommendation_cap(self) -> Optional[int]:
        return self._cap

    @property
    def scoring_mode(self) -> ScoringMode:
        return self._ranker.policy.scoring_mode

    def rank(
        self,
        catalog: Sequence[CatalogItem],
        project: Optional[ProjectProfile],
    ) -> List[ScoredItem]:
        """
        Rank a catalog of this kind against a project.

        Args:
            catalog: All items of this kind.
            project: The active project, or None.

        Returns:
            The full catalog annotated and in display order.
        """
        project_tags = extract_project_tags(project)

        if self._logger:
            self._logger.ranking_start(self.KIND.value, len(catalog), project_tags)

        ranked = self._ranker.rank_with_tags(
            catalog, project_tags, on_demote=self._on_demote
        )

        if self._logger:
            self._logger.ranking_end(self.KIND.value, ranked)

        return ranked

    def _on_demote(self, entry: ScoredItem) -> None:
        if self._logger:
            self._logger.demoted(self.KIND.value, entry.item.slug, entry.score, self._cap)
