"""
Dependency Injection Container.

This module provides a centralized container for the engine's shared
services: the ranking logger and the RankerFactory. Nothing here reads
the environment; ranking behaviour depends only on call arguments.

Example:
    from stackmatch.services.container import get_container

    container = get_container()
    ranker = container.ranker_factory.create("template")
"""

from functools import lru_cache
from typing import Optional

from stackmatch.core.logging import RankingLogger


class DependencyContainer:
    """
    Centralized container for engine dependencies.

    Attributes:
        _ranker_factory: Cached RankerFactory instance.
        _logger: Logger instance for ranking traces.
    """

    def __init__(self) -> None:
        """Initialize the container with lazy service references."""
        self._ranker_factory = None
        self._logger: Optional[RankingLogger] = None

    @property
    def logger(self) -> RankingLogger:
        """
        Get the ranking logger instance.

        Returns:
            RankingLogger for tracing ranking runs.
        """
        if self._logger is None:
            self._logger = RankingLogger("container")
        return self._logger

    @property
    def ranker_factory(self):
        """
        Get the RankerFactory instance.

        The factory is built with the container's logger, so every ranker
        it creates shares it.

        Returns:
            RankerFactory for creating catalog-kind rankers.
        """
        if self._ranker_factory is None:
            # Import here to avoid circular imports
            from stackmatch.rankers.ranker_factory import RankerFactory
            self._ranker_factory = RankerFactory(logger=self.logger)
        return self._ranker_factory

    def reset(self) -> None:
        """
        Reset all cached services.

        Useful for testing to ensure fresh instances.
        """
        self._ranker_factory = None
        self._logger = None

    def override_logger(self, logger) -> None:
        """
        Override the ranking logger with a mock.

        Args:
            logger: Object implementing RankingLoggerProtocol.
        """
        self._logger = logger
        # Reset factory to pick up the new logger
        self._ranker_factory = None


@lru_cache(maxsize=1)
def get_container() -> DependencyContainer:
    """
    Get the singleton DependencyContainer instance.

    Returns:
        The global DependencyContainer instance.
    """
    return DependencyContainer()


def reset_container() -> None:
    """
    Reset the global container singleton.

    Clears the lru_cache and allows a fresh container to be created.
    Useful for testing isolation.
    """
    get_container.cache_clear()
