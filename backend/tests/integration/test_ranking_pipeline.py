"""
Integration tests for the public ranking entry points.

Exercises rank_templates / rank_agents / rank_teams end to end through the
global container and the project models.
"""

import logging

import pytest

from stackmatch import (
    CatalogItem,
    ProjectProfile,
    TechTag,
    extract_project_tags,
    rank_agents,
    rank_catalog,
    rank_teams,
    rank_templates,
)
from stackmatch.core.exceptions import UnknownCatalogKindError
from stackmatch.services.container import DependencyContainer, get_container, reset_container
from stackmatch.skills.catalog_ranker import suggest_items, summarize_ranking


def recommended_slugs(ranked):
    return [e.item.slug for e in ranked if e.is_recommended]


@pytest.mark.integration
class TestRankingPipeline:
    """End-to-end ranking through the public API."""

    def test_templates_capped_at_five(self, global_container, template_catalog, nextjs_project):
        ranked = rank_templates(template_catalog, nextjs_project)

        assert recommended_slugs(ranked) == [
            "fullstack",
            "ts-tooling",
            "nextjs-app",
            "vitest-setup",
            "code-review",
        ]
        assert [e.item.slug for e in ranked[5:]] == ["django-admin", "supabase-rls", "tailwind-ui"]

    def test_teams_capped_at_three(self, global_container, template_catalog, nextjs_project):
        ranked = rank_teams(template_catalog, nextjs_project)

        assert recommended_slugs(ranked) == ["fullstack", "ts-tooling", "nextjs-app"]

    def test_agents_uncapped(self, global_container, template_catalog, nextjs_project):
        ranked = rank_agents(template_catalog, nextjs_project)

        assert len(recommended_slugs(ranked)) == 7
        assert ranked[-1].item.slug == "django-admin"

    def test_five_universal_teams(self, global_container, make_item, make_project):
        """Only three of five equally-scored universal teams stay recommended."""
        catalog = [
            make_item(f"team-{i}", tags=["universal"], name=f"Team {i}") for i in range(5)
        ]

        ranked = rank_teams(catalog, make_project(language="Rust"))

        assert recommended_slugs(ranked) == ["team-0", "team-1", "team-2"]
        assert [e.score for e in ranked] == [75] * 5
        assert [e.item.slug for e in ranked[3:]] == ["team-3", "team-4"]

    def test_rank_catalog_by_kind_name(self, global_container, template_catalog, nextjs_project):
        assert rank_catalog("team", template_catalog, nextjs_project) == rank_teams(
            template_catalog, nextjs_project
        )

    def test_unknown_kind(self, global_container, template_catalog, nextjs_project):
        with pytest.raises(UnknownCatalogKindError):
            rank_catalog("plugin", template_catalog, nextjs_project)

    def test_legacy_mode_override(self, global_container, template_catalog, nextjs_project):
        """A per-call mode switches the regime."""
        ranked = rank_agents(template_catalog, nextjs_project, mode="legacy")

        scores = {e.item.slug: e.score for e in ranked}
        assert scores["code-review"] == 60
        assert scores["tailwind-ui"] == 70

    def test_environment_does_not_change_ranking(
        self, make_item, make_project, monkeypatch, tmp_path
    ):
        """STACKMATCH_* variables and a local .env leave caps and mode alone."""
        catalog = [
            make_item(f"tpl-{i}", tags=["universal"], name=f"Template {i}") for i in range(8)
        ]
        monkeypatch.setenv("STACKMATCH_TEMPLATE_RECOMMENDATION_CAP", "8")
        monkeypatch.setenv("STACKMATCH_SCORING_MODE", "legacy")
        (tmp_path / ".env").write_text("STACKMATCH_TEAM_RECOMMENDATION_CAP=8\n")
        monkeypatch.chdir(tmp_path)
        reset_container()

        try:
            templates = rank_templates(catalog, make_project(language="Go"))
            teams = rank_teams(catalog, make_project(language="Go"))
        finally:
            reset_container()

        assert len(recommended_slugs(templates)) == 5
        assert len(recommended_slugs(teams)) == 3
        assert {e.score for e in templates} == {75}

    def test_demotions_reach_container_logger(
        self, global_container, mock_logger, template_catalog, nextjs_project
    ):
        rank_templates(template_catalog, nextjs_project)

        demoted = [c[0][1] for c in mock_logger.demoted.call_args_list]
        assert demoted == ["supabase-rls", "tailwind-ui"]


@pytest.mark.integration
class TestProjectPayloads:
    """Ranking straight from camelCase project payloads."""

    def test_camel_case_project(self, global_container):
        project = ProjectProfile.model_validate(
            {
                "language": "Python",
                "framework": "FastAPI",
                "testing": "pytest",
                "stackExtras": {"hosting": "Railway", "monitoring": "Sentry"},
            }
        )
        catalog = [
            CatalogItem(slug="api-tests", name="API Tests", tags=["python", "fastapi", "pytest"]),
            CatalogItem(slug="deploy", name="Deploy", tags=[TechTag.RAILWAY, TechTag.SENTRY]),
            CatalogItem(slug="react-ui", name="React UI", tags=["react"]),
        ]

        ranked = rank_teams(catalog, project)

        assert extract_project_tags(project)[-1] is TechTag.SENTRY
        assert [(e.item.slug, e.score) for e in ranked] == [
            ("api-tests", 100),
            ("deploy", 80),
            ("react-ui", 0),
        ]

    def test_suggestions_skip_existing(self, global_container, template_catalog, nextjs_project):
        """The suggestion strip omits items the project already has."""
        ranked = rank_templates(template_catalog, nextjs_project)

        suggestions = suggest_items(ranked, exclude_names=["FULLSTACK"])

        assert [s.item.slug for s in suggestions] == [
            "ts-tooling",
            "nextjs-app",
            "vitest-setup",
            "code-review",
        ]
        assert summarize_ranking(ranked).recommended == 5


class TestContainer:
    """Tests for DependencyContainer and the global singleton."""

    def test_get_container_is_cached(self):
        reset_container()
        try:
            assert get_container() is get_container()
        finally:
            reset_container()

    def test_reset_container_creates_new_instance(self):
        first = get_container()
        reset_container()
        try:
            assert get_container() is not first
        finally:
            reset_container()

    def test_factory_is_cached_until_override(self, mock_logger):
        container = DependencyContainer()
        factory = container.ranker_factory

        assert container.ranker_factory is factory

        container.override_logger(mock_logger)
        assert container.ranker_factory is not factory
        assert container.logger is mock_logger

    def test_reset_clears_services(self):
        container = DependencyContainer()
        factory = container.ranker_factory

        container.reset()

        assert container.ranker_factory is not factory

    def test_ranking_leaves_root_logger_untouched(
        self, template_catalog, nextjs_project, monkeypatch
    ):
        """The default container never adds root handlers or changes the root level."""
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        level = root.level
        reset_container()

        try:
            rank_templates(template_catalog, nextjs_project)
        finally:
            reset_container()

        assert root.handlers == []
        assert root.level == level
