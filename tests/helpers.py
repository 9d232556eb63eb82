import sqlite3

from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.slots import Slot
from fantasy_football_manager.domain.team import Outcome, Team
from fantasy_football_manager.repos.player_repo import SqlitePlayerRepo
from fantasy_football_manager.repos.team_repo import SqliteTeamRepo


def seed_team(
    conn: sqlite3.Connection,
    *,
    name: str = "Test Team",
    record: dict[str, Outcome] | None = None,
    lineups: dict[str, dict[Slot, str]] | None = None,
) -> int:
    """Seed a team (with optional record and lineups) and commit."""
    team_id = SqliteTeamRepo(conn).insert(Team(name=name, record=record or {}, lineups=lineups or {}))
    conn.commit()
    return team_id


def seed_player(
    conn: sqlite3.Connection,
    *,
    name: str = "Test Player",
    team_id: int | None = None,
    position: Slot | None = None,
    points: dict[str, float] | None = None,
) -> int:
    """Seed a player row for testing and commit."""
    player_id = SqlitePlayerRepo(conn).insert(
        Player(name=name, team_id=team_id, position=position, points=points or {})
    )
    conn.commit()
    return player_id
