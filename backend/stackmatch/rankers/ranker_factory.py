"""
Ranker Factory for creating catalog-kind rankers.

This module implements the Factory pattern for instantiating the ranker of
a catalog kind. It keeps a class-level registry of kind → ranker class and
injects the scoring mode and logger. Each ranker uses its own kind's cap
unless the caller passes one explicitly.

Example:
    from stackmatch.rankers.ranker_factory import RankerFactory

    factory = RankerFactory(logger=ranking_logger)
    ranker = factory.create("team")
    ranked = ranker.rank(TEAM_CATALOG, project)
"""

from typing import Dict, List, Optional, Type

from stackmatch.core.exceptions import UnknownCatalogKindError
from stackmatch.rankers.base import USE_DEFAULT_CAP, BaseCatalogRanker, RankingLoggerProtocol
from stackmatch.rankers.kinds import CatalogKind
from stackmatch.skills.relevance_scorer import ScoringMode


class RankerFactory:
    """
    Factory for creating rankers by catalog kind.

    Attributes:
        _registry: Class-level mapping of catalog kinds to ranker classes.

    Example:
        >>> factory = RankerFactory()
        >>> factory.create(CatalogKind.TEMPLATE).recommendation_cap
        5
    """

    _registry: Dict[CatalogKind, Type[BaseCatalogRanker]] = {}
    _initialized: bool = False

    def __init__(self, logger: Optional[RankingLoggerProtocol] = None) -> None:
        """
        Initialize the ranker factory with dependencies.

        Args:
            logger: Optional logger injected into every created ranker.
        """
        self._logger = logger

        if not RankerFactory._initialized:
            self._initialize_registry()

    @classmethod
    def _initialize_registry(cls) -> None:
        """Register the built-in rankers (imported lazily to avoid cycles)."""
        from stackmatch.rankers.catalogs import AgentRanker, TeamRanker, TemplateRanker

        cls._registry = {
            CatalogKind.TEMPLATE: TemplateRanker,
            CatalogKind.AGENT: AgentRanker,
            CatalogKind.TEAM: TeamRanker,
        }
        cls._initialized = True

    def create(
        self,
        kind: "CatalogKind | str",
        mode: "Optional[ScoringMode | str]" = None,
        cap: "Optional[int] | object" = USE_DEFAULT_CAP,
    ) -> BaseCatalogRanker:
        """
        Create the ranker for a catalog kind.

        Args:
            kind: Catalog kind (enum member or 'template' / 'agent' / 'team').
            mode: Optional scoring mode; defaults to ScoringMode.IMPROVED.
            cap: Optional cap override (None disables capping); defaults to
                the ranker's DEFAULT_CAP.

        Returns:
            A ranker configured with the cap and the scoring mode.

        Raises:
            UnknownCatalogKindError: If no ranker is registered for kind.
            ScoringConfigurationError: If mode is not a known regime.
        """
        catalog_kind = CatalogKind.parse(kind)

        ranker_class = self._registry.get(catalog_kind)
        if ranker_class is None:
            raise UnknownCatalogKindError(
                catalog_kind.value, valid_kinds=self.get_registered_kinds()
            )

        return ranker_class(
            mode=mode if mode is not None else ScoringMode.IMPROVED,
            cap=cap,
            logger=self._logger,
        )

    @classmethod
    def register(
        cls,
        kind: "CatalogKind | str",
        ranker_class: Type[BaseCatalogRanker],
    ) -> None:
        """
        Register a ranker class for a catalog kind.

        Useful for testing with custom rankers.

        Raises:
            UnknownCatalogKindError: If kind is not a CatalogKind.
        """
        if not cls._initialized:
            cls._initialize_registry()
        cls._registry[CatalogKind.parse(kind)] = ranker_class

    @classmethod
    def get_registered_kinds(cls) -> List[str]:
        """Return the catalog kinds that have a registered ranker."""
        return [kind.value for kind in cls._registry]

    @classmethod
    def is_registered(cls, kind: "CatalogKind | str") -> bool:
        """Check whether a kind has a registered ranker (unknown kinds → False)."""
        try:
            return CatalogKind.parse(kind) in cls._registry
        except UnknownCatalogKindError:
            return False

    @classmethod
    def reset_registry(cls) -> None:
        """Restore the built-in registry."""
        cls._initialized = False
        cls._initialize_registry()
