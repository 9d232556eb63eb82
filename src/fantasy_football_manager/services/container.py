"""Wires repos and services onto a single database connection."""

import sqlite3
from dataclasses import dataclass

from fantasy_football_manager.repos.league_config_repo import SqliteLeagueConfigRepo
from fantasy_football_manager.repos.matchup_repo import SqliteMatchupRepo
from fantasy_football_manager.repos.player_repo import SqlitePlayerRepo
from fantasy_football_manager.repos.team_repo import SqliteTeamRepo
from fantasy_football_manager.services.current_week import CurrentWeekService
from fantasy_football_manager.services.legacy_import import LegacyImporter
from fantasy_football_manager.services.matchup_service import MatchupService
from fantasy_football_manager.services.roster_service import RosterService
from fantasy_football_manager.services.scoreboard_service import ScoreboardService


@dataclass(frozen=True)
class LeagueServices:
    roster: RosterService
    current_week: CurrentWeekService
    matchups: MatchupService
    scoreboard: ScoreboardService
    legacy_importer: LegacyImporter


def build_league_services(conn: sqlite3.Connection) -> LeagueServices:
    team_repo = SqliteTeamRepo(conn)
    player_repo = SqlitePlayerRepo(conn)
    config_repo = SqliteLeagueConfigRepo(conn)
    matchup_repo = SqliteMatchupRepo(conn)

    roster = RosterService(team_repo, player_repo)
    current_week = CurrentWeekService(config_repo)
    return LeagueServices(
        roster=roster,
        current_week=current_week,
        matchups=MatchupService(matchup_repo, team_repo),
        scoreboard=ScoreboardService(roster, player_repo, matchup_repo, current_week),
        legacy_importer=LegacyImporter(team_repo, player_repo, config_repo, matchup_repo),
    )
