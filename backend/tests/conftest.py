"""
Pytest configuration and shared fixtures.

This module provides common fixtures for testing StackMatch.
Catalog items and projects are built in memory; nothing reads from disk.

Usage:
    def test_example(make_item, make_project, test_container):
        item = make_item("nextjs-starter", tags=["typescript", "nextjs"])
        project = make_project(language="TypeScript", framework="Next.js")
        ranker = test_container.ranker_factory.create("template")
"""

import pytest
from unittest.mock import MagicMock


# =============================================================================
# CATALOG FIXTURES
# =============================================================================


@pytest.fixture
def make_item():
    """
    Factory fixture for creating CatalogItems.

    The display name defaults to a title-cased slug.

    Usage:
        def test_example(make_item):
            item = make_item("react-hooks", tags=["react"], category="frontend")
    """
    from stackmatch.skills.relevance_scorer import CatalogItem

    def _create_item(
        slug: str = "sample-item",
        tags=(),
        name: str = None,
        description: str = "",
        category: str = None,
    ):
        return CatalogItem(
            slug=slug,
            name=name or slug.replace("-", " ").title(),
            description=description,
            category=category,
            tags=list(tags),
        )
    return _create_item


@pytest.fixture
def make_project():
    """
    Factory fixture for creating ProjectProfiles.

    Usage:
        def test_example(make_project):
            project = make_project(language="Python", framework="FastAPI")
    """
    from stackmatch.skills.tech_tag_mapper import ProjectProfile

    def _create_project(**fields):
        fields.setdefault("language", "")
        return ProjectProfile(**fields)
    return _create_project


@pytest.fixture
def nextjs_project(make_project):
    """
    TypeScript + Next.js + Supabase + Vitest + Tailwind project.

    Usage:
        def test_example(nextjs_project):
            assert nextjs_project.framework == "Next.js"
    """
    return make_project(
        language="TypeScript",
        framework="Next.js",
        database="Supabase",
        testing="Vitest",
        styling="Tailwind CSS",
    )


@pytest.fixture
def template_catalog(make_item):
    """
    Eight items with a spread of improved scores against nextjs_project:

        fullstack 100, ts-tooling 90, nextjs-app 80, vitest-setup 80,
        code-review 75 (universal), supabase-rls 60, tailwind-ui 60,
        django-admin 0
    """
    return [
        make_item("nextjs-app", tags=["typescript", "nextjs"], name="Next.js App", category="frontend"),
        make_item("supabase-rls", tags=["supabase"], name="Supabase RLS", category="database"),
        make_item("vitest-setup", tags=["vitest", "typescript"], name="Vitest Setup", category="testing"),
        make_item("tailwind-ui", tags=["tailwind", "react"], name="Tailwind UI", category="frontend"),
        make_item("fullstack", tags=["typescript", "nextjs", "supabase", "python"], name="Fullstack", category="frontend"),
        make_item("ts-tooling", tags=["typescript", "vitest", "tailwind", "rust", "go", "java", "ruby"], name="TS Tooling", category="testing"),
        make_item("code-review", tags=["universal"], name="Code Review", category="general"),
        make_item("django-admin", tags=["python", "django"], name="Django Admin", category="backend"),
    ]


# =============================================================================
# CONTAINER FIXTURES
# =============================================================================


@pytest.fixture
def test_settings():
    """
    Factory fixture for Settings that ignore the environment's .env file.

    Usage:
        def test_example(test_settings):
            settings = test_settings(log_level="DEBUG")
    """
    from stackmatch.core.config import Settings

    def _create_settings(**overrides):
        return Settings(_env_file=None, **overrides)
    return _create_settings


@pytest.fixture
def test_container(mock_logger):
    """
    DependencyContainer with a mock logger.

    Usage:
        def test_example(test_container):
            factory = test_container.ranker_factory
            ranker = factory.create("team")
    """
    from stackmatch.services.container import DependencyContainer

    container = DependencyContainer()
    container.override_logger(mock_logger)
    return container


@pytest.fixture
def test_factory(test_container):
    """
    RankerFactory instance with mocked dependencies.

    Usage:
        def test_example(test_factory):
            ranker = test_factory.create("agent")
    """
    return test_container.ranker_factory


@pytest.fixture
def global_container(test_container):
    """
    Installs test_container as the process-wide container.

    The public rank_* functions go through get_container(); this fixture
    swaps the cached singleton for the test and restores it afterwards.
    """
    from stackmatch.services import container as container_module

    container_module.reset_container()
    original = container_module.get_container()
    original.override_logger(test_container.logger)
    yield original
    container_module.reset_container()


# =============================================================================
# LOGGER FIXTURES
# =============================================================================


@pytest.fixture
def mock_logger():
    """
    Mock logger for testing ranking trace behavior.

    Usage:
        def test_example(mock_logger):
            ranker = TeamRanker(logger=mock_logger)
            mock_logger.ranking_start.assert_called_once()
    """
    logger = MagicMock()
    logger.ranking_start = MagicMock()
    logger.ranking_end = MagicMock()
    logger.demoted = MagicMock()
    return logger


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
