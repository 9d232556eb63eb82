import json
import logging
import sqlite3

from fantasy_football_manager.domain.lineup import sanitize_lineup
from fantasy_football_manager.domain.slots import Slot
from fantasy_football_manager.domain.team import Outcome, Team

logger = logging.getLogger(__name__)


class SqliteTeamRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def insert(self, team: Team) -> int:
        cursor = self._conn.execute("INSERT INTO team (name) VALUES (?)", (team.name,))
        team_id: int = cursor.lastrowid  # type: ignore[assignment]
        for week, outcome in team.record.items():
            self.set_record(team_id, week, outcome)
        for week, lineup in team.lineups.items():
            if lineup:
                self.set_lineup(team_id, week, lineup)
        return team_id

    def get_by_id(self, team_id: int) -> Team | None:
        row = self._conn.execute("SELECT id, name FROM team WHERE id = ?", (team_id,)).fetchone()
        if row is None:
            return None
        records = self._records_by_team("WHERE team_id = ?", (team_id,))
        lineups = self._lineups_by_team("WHERE team_id = ?", (team_id,))
        return self._row_to_team(row, records.get(team_id, {}), lineups.get(team_id, {}))

    def all(self) -> list[Team]:
        rows = self._conn.execute("SELECT id, name FROM team ORDER BY id").fetchall()
        records = self._records_by_team()
        lineups = self._lineups_by_team()
        return [self._row_to_team(row, records.get(row["id"], {}), lineups.get(row["id"], {})) for row in rows]

    def set_record(self, team_id: int, week: str, outcome: Outcome) -> None:
        self._conn.execute(
            "INSERT INTO team_record (team_id, week, result) VALUES (?, ?, ?)"
            " ON CONFLICT(team_id, week) DO UPDATE SET result=excluded.result",
            (team_id, week, outcome.value),
        )

    def set_lineup(self, team_id: int, week: str, lineup: dict[Slot, str]) -> None:
        payload = json.dumps({slot.value: player_id for slot, player_id in lineup.items()})
        self._conn.execute(
            "INSERT INTO team_lineup (team_id, week, lineup_json) VALUES (?, ?, ?)"
            " ON CONFLICT(team_id, week) DO UPDATE SET lineup_json=excluded.lineup_json",
            (team_id, week, payload),
        )

    def delete_lineup(self, team_id: int, week: str) -> None:
        self._conn.execute("DELETE FROM team_lineup WHERE team_id = ? AND week = ?", (team_id, week))

    def _records_by_team(self, where: str = "", params: tuple[object, ...] = ()) -> dict[int, dict[str, Outcome]]:
        records: dict[int, dict[str, Outcome]] = {}
        for row in self._conn.execute(f"SELECT team_id, week, result FROM team_record {where}", params):
            records.setdefault(row["team_id"], {})[row["week"]] = Outcome(row["result"])
        return records

    def _lineups_by_team(self, where: str = "", params: tuple[object, ...] = ()) -> dict[int, dict[str, dict[Slot, str]]]:
        lineups: dict[int, dict[str, dict[Slot, str]]] = {}
        for row in self._conn.execute(f"SELECT team_id, week, lineup_json FROM team_lineup {where}", params):
            try:
                lineup = sanitize_lineup(json.loads(row["lineup_json"]))
            except json.JSONDecodeError:
                logger.warning("Skipping unreadable lineup for team %s %s", row["team_id"], row["week"])
                continue
            if lineup:
                lineups.setdefault(row["team_id"], {})[row["week"]] = lineup
        return lineups

    @staticmethod
    def _row_to_team(row: sqlite3.Row, record: dict[str, Outcome], lineups: dict[str, dict[Slot, str]]) -> Team:
        return Team(id=row["id"], name=row["name"], record=record, lineups=lineups)
