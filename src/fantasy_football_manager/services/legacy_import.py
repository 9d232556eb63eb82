"""One-time import of a legacy document-store export.

The export holds ``teams``, ``players`` and ``settings`` collections as
written by the original document store. Ids may be bare strings or
``{"$oid": ...}`` references; they are remapped to fresh store ids.

Teams that only carry the old single ``lineup`` field get it migrated to
their ``week1`` lineup. Nothing keeps the single-lineup shape after import.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from fantasy_football_manager.domain.identifiers import parse_id_ref
from fantasy_football_manager.domain.league_config import LeagueConfig
from fantasy_football_manager.domain.lineup import sanitize_lineup
from fantasy_football_manager.domain.player import Player, coerce_points
from fantasy_football_manager.domain.slots import Slot, normalize_slot
from fantasy_football_manager.domain.team import Outcome, Team
from fantasy_football_manager.domain.week import DEFAULT_WEEK, normalize_week
from fantasy_football_manager.exceptions import FfmException
from fantasy_football_manager.repos.protocols import LeagueConfigRepo, MatchupRepo, PlayerRepo, TeamRepo

logger = logging.getLogger(__name__)


class LegacyImportError(FfmException):
    pass


@dataclass(frozen=True)
class ImportSummary:
    teams: int
    players: int
    lineups: int
    legacy_lineups_migrated: int
    matchup_weeks: int
    current_week: str | None


def _collection(document: Mapping[str, object], name: str) -> list[Mapping[str, object]]:
    raw = document.get(name, [])
    if not isinstance(raw, list) or not all(isinstance(entry, Mapping) for entry in raw):
        raise LegacyImportError(f"'{name}' must be a list of objects")
    return raw


def _legacy_id(entry: Mapping[str, object], collection: str) -> str:
    ref = parse_id_ref(entry.get("_id"))
    if ref is None:
        raise LegacyImportError(f"{collection} entry without a usable _id: {entry!r}")
    return ref.value


def _mapping(raw: object) -> Mapping[str, object]:
    return raw if isinstance(raw, Mapping) else {}


class LegacyImporter:
    def __init__(
        self,
        team_repo: TeamRepo,
        player_repo: PlayerRepo,
        config_repo: LeagueConfigRepo,
        matchup_repo: MatchupRepo,
    ) -> None:
        self._team_repo = team_repo
        self._player_repo = player_repo
        self._config_repo = config_repo
        self._matchup_repo = matchup_repo

    def import_document(self, document: object) -> ImportSummary:
        if not isinstance(document, Mapping):
            raise LegacyImportError("export must be a JSON object")
        teams = _collection(document, "teams")
        players = _collection(document, "players")
        settings = _collection(document, "settings")

        team_ids = self._import_teams(teams)
        player_ids = self._import_players(players, team_ids)
        lineups, migrated = self._import_lineups(teams, team_ids, player_ids)
        current_week, matchup_weeks = self._import_settings(settings, team_ids)

        summary = ImportSummary(
            teams=len(team_ids),
            players=len(player_ids),
            lineups=lineups,
            legacy_lineups_migrated=migrated,
            matchup_weeks=matchup_weeks,
            current_week=current_week,
        )
        logger.info("Imported legacy export: %s", summary)
        return summary

    def _import_teams(self, teams: list[Mapping[str, object]]) -> dict[str, int]:
        team_ids: dict[str, int] = {}
        for entry in teams:
            legacy_id = _legacy_id(entry, "team")
            name = entry.get("name")
            if not isinstance(name, str) or not name.strip():
                raise LegacyImportError(f"team {legacy_id} has no name")
            record: dict[str, Outcome] = {}
            for raw_week, raw_result in _mapping(entry.get("record")).items():
                week = normalize_week(raw_week)
                if week is None or not isinstance(raw_result, str) or raw_result not in {o.value for o in Outcome}:
                    logger.warning("Dropping record entry %r=%r for team %s", raw_week, raw_result, legacy_id)
                    continue
                record[week] = Outcome(raw_result)
            team_ids[legacy_id] = self._team_repo.insert(Team(name=name.strip(), record=record))
        return team_ids

    def _import_players(self, players: list[Mapping[str, object]], team_ids: dict[str, int]) -> dict[str, int]:
        player_ids: dict[str, int] = {}
        for entry in players:
            legacy_id = _legacy_id(entry, "player")
            name = entry.get("name")
            if not isinstance(name, str) or not name.strip():
                raise LegacyImportError(f"player {legacy_id} has no name")

            team_ref = parse_id_ref(entry.get("teamId"))
            team_id = team_ids.get(team_ref.value) if team_ref is not None else None
            if team_ref is not None and team_id is None:
                logger.warning("Player %s references unknown team %s; importing as free agent", legacy_id, team_ref.value)

            points: dict[str, float] = {}
            for raw_week, raw_points in _mapping(entry.get("points")).items():
                week = normalize_week(raw_week)
                value = coerce_points(raw_points)
                if week is None or value is None:
                    logger.warning("Dropping points entry %r=%r for player %s", raw_week, raw_points, legacy_id)
                    continue
                points[week] = value

            player = Player(
                name=name.strip(),
                team_id=team_id,
                points=points,
                position=normalize_slot(entry.get("position")),
            )
            player_ids[legacy_id] = self._player_repo.insert(player)
        return player_ids

    def _import_lineups(
        self,
        teams: list[Mapping[str, object]],
        team_ids: dict[str, int],
        player_ids: dict[str, int],
    ) -> tuple[int, int]:
        stored = 0
        migrated = 0
        for entry in teams:
            team_id = team_ids[_legacy_id(entry, "team")]
            weekly = dict(_mapping(entry.get("lineups")))
            if not any(sanitize_lineup(lineup) for lineup in weekly.values()) and sanitize_lineup(entry.get("lineup")):
                weekly = {DEFAULT_WEEK: entry.get("lineup")}
                migrated += 1
            for raw_week, raw_lineup in weekly.items():
                week = normalize_week(raw_week)
                lineup = self._remap_lineup(sanitize_lineup(raw_lineup), player_ids)
                if week is None or not lineup:
                    continue
                self._team_repo.set_lineup(team_id, week, lineup)
                stored += 1
        return stored, migrated

    @staticmethod
    def _remap_lineup(lineup: dict[Slot, str], player_ids: dict[str, int]) -> dict[Slot, str]:
        return {slot: str(player_ids[legacy]) for slot, legacy in lineup.items() if legacy in player_ids}

    def _import_settings(self, settings: list[Mapping[str, object]], team_ids: dict[str, int]) -> tuple[str | None, int]:
        current_week: str | None = None
        matchup_weeks = 0
        for entry in settings:
            key = entry.get("key")
            value = entry.get("value")
            if key == "currentWeek":
                current_week = normalize_week(value)
                if current_week is None:
                    logger.warning("Ignoring invalid legacy current week %r", value)
                    continue
                self._config_repo.save(LeagueConfig(current_week=current_week))
            elif key == "matchups":
                for raw_week, raw_pairs in _mapping(value).items():
                    week = normalize_week(raw_week)
                    pairs = {
                        team_ids[team.value]: team_ids[opponent.value]
                        for raw_team, raw_opponent in _mapping(raw_pairs).items()
                        if (team := parse_id_ref(raw_team)) is not None
                        and (opponent := parse_id_ref(raw_opponent)) is not None
                        and team.value in team_ids
                        and opponent.value in team_ids
                    }
                    if week is None or not pairs:
                        continue
                    self._matchup_repo.replace_week(week, pairs)
                    matchup_weeks += 1
            else:
                logger.warning("Ignoring unknown legacy setting %r", key)
        return current_week, matchup_weeks
