import sqlite3

from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.slots import normalize_slot


class SqlitePlayerRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def insert(self, player: Player) -> int:
        cursor = self._conn.execute(
            "INSERT INTO player (name, team_id, position) VALUES (?, ?, ?)",
            (player.name, player.team_id, player.position.value if player.position else None),
        )
        player_id: int = cursor.lastrowid  # type: ignore[assignment]
        for week, points in player.points.items():
            self.set_points(player_id, week, points)
        return player_id

    def get_by_id(self, player_id: int) -> Player | None:
        row = self._conn.execute("SELECT * FROM player WHERE id = ?", (player_id,)).fetchone()
        if row is None:
            return None
        points = self._points_by_player("WHERE player_id = ?", (player_id,))
        return self._row_to_player(row, points.get(player_id, {}))

    def get_by_team(self, team_id: int) -> list[Player]:
        rows = self._conn.execute("SELECT * FROM player WHERE team_id = ? ORDER BY id", (team_id,)).fetchall()
        points = self._points_by_player(
            "WHERE player_id IN (SELECT id FROM player WHERE team_id = ?)",
            (team_id,),
        )
        return [self._row_to_player(row, points.get(row["id"], {})) for row in rows]

    def all(self) -> list[Player]:
        rows = self._conn.execute("SELECT * FROM player ORDER BY id").fetchall()
        points = self._points_by_player()
        return [self._row_to_player(row, points.get(row["id"], {})) for row in rows]

    def set_points(self, player_id: int, week: str, points: float) -> None:
        self._conn.execute(
            "INSERT INTO player_points (player_id, week, points) VALUES (?, ?, ?)"
            " ON CONFLICT(player_id, week) DO UPDATE SET points=excluded.points",
            (player_id, week, points),
        )

    def _points_by_player(self, where: str = "", params: tuple[object, ...] = ()) -> dict[int, dict[str, float]]:
        points: dict[int, dict[str, float]] = {}
        for row in self._conn.execute(f"SELECT player_id, week, points FROM player_points {where}", params):
            points.setdefault(row["player_id"], {})[row["week"]] = row["points"]
        return points

    @staticmethod
    def _row_to_player(row: sqlite3.Row, points: dict[str, float]) -> Player:
        return Player(
            id=row["id"],
            name=row["name"],
            team_id=row["team_id"],
            points=points,
            position=normalize_slot(row["position"]),
        )
