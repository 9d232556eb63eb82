"""League services and their composition root."""

from fantasy_football_manager.services.container import LeagueServices, build_league_services

__all__ = [
    "LeagueServices",
    "build_league_services",
]
