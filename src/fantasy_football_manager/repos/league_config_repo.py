import sqlite3

from fantasy_football_manager.domain.league_config import LeagueConfig


class SqliteLeagueConfigRepo:
    """Single-row store for league-wide settings."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def get(self) -> LeagueConfig | None:
        row = self._conn.execute("SELECT current_week FROM league_config WHERE id = 1").fetchone()
        if row is None:
            return None
        return LeagueConfig(current_week=row["current_week"])

    def save(self, config: LeagueConfig) -> None:
        self._conn.execute(
            "INSERT INTO league_config (id, current_week) VALUES (1, ?)"
            " ON CONFLICT(id) DO UPDATE SET current_week=excluded.current_week",
            (config.current_week,),
        )
