from stackmatch.services.container import DependencyContainer, get_container, reset_container
from stackmatch.services.ranking import rank_agents, rank_catalog, rank_teams, rank_templates

__all__ = [
    "DependencyContainer",
    "get_container",
    "rank_agents",
    "rank_catalog",
    "rank_teams",
    "rank_templates",
    "reset_container",
]
