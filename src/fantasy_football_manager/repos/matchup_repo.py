import sqlite3


class SqliteMatchupRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def get_all(self) -> dict[str, dict[int, int]]:
        matchups: dict[str, dict[int, int]] = {}
        for row in self._conn.execute("SELECT week, team_id, opponent_id FROM matchup ORDER BY week, team_id"):
            matchups.setdefault(row["week"], {})[row["team_id"]] = row["opponent_id"]
        return matchups

    def get_week(self, week: str) -> dict[int, int]:
        rows = self._conn.execute(
            "SELECT team_id, opponent_id FROM matchup WHERE week = ? ORDER BY team_id",
            (week,),
        ).fetchall()
        return {row["team_id"]: row["opponent_id"] for row in rows}

    def replace_week(self, week: str, matchups: dict[int, int]) -> None:
        self._conn.execute("DELETE FROM matchup WHERE week = ?", (week,))
        self._conn.executemany(
            "INSERT INTO matchup (week, team_id, opponent_id) VALUES (?, ?, ?)",
            [(week, team_id, opponent_id) for team_id, opponent_id in matchups.items()],
        )
