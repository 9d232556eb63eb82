import logging

from fantasy_football_manager.domain.errors import LeagueError, ValidationError, not_found
from fantasy_football_manager.domain.identifiers import parse_id_ref, to_entity_id
from fantasy_football_manager.domain.lineup import LineupSource, ResolvedLineup, resolve_lineup, sanitize_lineup
from fantasy_football_manager.domain.player import Player, coerce_points
from fantasy_football_manager.domain.result import Err, Ok, Result
from fantasy_football_manager.domain.slots import normalize_slot
from fantasy_football_manager.domain.team import Outcome, Team
from fantasy_football_manager.domain.week import DEFAULT_WEEK, normalize_week
from fantasy_football_manager.repos.protocols import PlayerRepo, TeamRepo

logger = logging.getLogger(__name__)


def _required_name(raw: object, entity: str) -> Result[str, ValidationError]:
    if not isinstance(raw, str) or not raw.strip():
        return Err(ValidationError(message=f"{entity} name is required"))
    return Ok(raw.strip())


def _required_week(raw: object) -> Result[str, ValidationError]:
    week = normalize_week(raw)
    if week is None:
        return Err(ValidationError(message=f"invalid week {raw!r}: expected 'week<number>'"))
    return Ok(week)


class RosterService:
    """Teams, players and their per-week points, results and lineups."""

    def __init__(self, team_repo: TeamRepo, player_repo: PlayerRepo) -> None:
        self._team_repo = team_repo
        self._player_repo = player_repo

    # Teams -------------------------------------------------------------

    def list_teams(self) -> list[Team]:
        return self._team_repo.all()

    def get_team(self, raw_team_id: object) -> Result[Team, LeagueError]:
        team_id = to_entity_id(raw_team_id)
        team = self._team_repo.get_by_id(team_id) if team_id is not None else None
        if team is None:
            return Err(not_found("team", raw_team_id))
        return Ok(team)

    def create_team(self, raw_name: object) -> Result[Team, LeagueError]:
        name = _required_name(raw_name, "team")
        if isinstance(name, Err):
            return name
        team_id = self._team_repo.insert(Team(name=name.value))
        logger.info("Created team %d (%s)", team_id, name.value)
        return self.get_team(team_id)

    def set_record(self, raw_team_id: object, raw_week: object, raw_result: object) -> Result[Team, LeagueError]:
        week = _required_week(raw_week)
        if isinstance(week, Err):
            return week
        if not isinstance(raw_result, str) or raw_result.strip().upper() not in {o.value for o in Outcome}:
            return Err(ValidationError(message="result must be 'W' or 'L'"))
        found = self.get_team(raw_team_id)
        if isinstance(found, Err):
            return found
        team_id = found.value.id
        assert team_id is not None
        self._team_repo.set_record(team_id, week.value, Outcome(raw_result.strip().upper()))
        return self.get_team(team_id)

    def set_lineup(self, raw_team_id: object, raw_week: object, raw_lineup: object) -> Result[Team, LeagueError]:
        """Store one week's lineup; an explicit empty lineup clears that week."""
        if raw_week is None or (isinstance(raw_week, str) and not raw_week.strip()):
            raw_week = DEFAULT_WEEK
        week = _required_week(raw_week)
        if isinstance(week, Err):
            return week
        if raw_lineup is None:
            return Err(ValidationError(message="lineup is required"))
        if not isinstance(raw_lineup, dict):
            return Err(ValidationError(message="lineup must be an object"))
        found = self.get_team(raw_team_id)
        if isinstance(found, Err):
            return found
        team_id = found.value.id
        assert team_id is not None

        lineup = sanitize_lineup(raw_lineup)
        if lineup:
            self._team_repo.set_lineup(team_id, week.value, lineup)
        else:
            self._team_repo.delete_lineup(team_id, week.value)
        logger.debug("Set lineup for team %d %s: %s", team_id, week.value, lineup)
        return self.get_team(team_id)

    def ensure_lineup(self, raw_team_id: object, raw_week: object) -> Result[ResolvedLineup, LeagueError]:
        """Resolve a week's lineup, saving a default one for teams that have none yet."""
        week = _required_week(raw_week)
        if isinstance(week, Err):
            return week
        found = self.get_team(raw_team_id)
        if isinstance(found, Err):
            return found
        team = found.value
        assert team.id is not None

        roster = self._player_repo.get_by_team(team.id)
        resolved = resolve_lineup(team.lineups, week.value, roster)
        if resolved.source is LineupSource.DEFAULT and not team.lineups:
            self._team_repo.set_lineup(team.id, week.value, resolved.player_ids())
            logger.info("Saved default lineup for team %d %s", team.id, week.value)
        return Ok(resolved)

    # Players -----------------------------------------------------------

    def list_players(self, raw_team_id: object = None) -> list[Player]:
        if raw_team_id is None or raw_team_id == "":
            return self._player_repo.all()
        team_id = to_entity_id(raw_team_id)
        if team_id is None:
            return []
        return self._player_repo.get_by_team(team_id)

    def get_player(self, raw_player_id: object) -> Result[Player, LeagueError]:
        player_id = to_entity_id(raw_player_id)
        player = self._player_repo.get_by_id(player_id) if player_id is not None else None
        if player is None:
            return Err(not_found("player", raw_player_id))
        return Ok(player)

    def create_player(
        self,
        raw_name: object,
        raw_team_id: object = None,
        raw_position: object = None,
    ) -> Result[Player, LeagueError]:
        name = _required_name(raw_name, "player")
        if isinstance(name, Err):
            return name

        position = None
        if raw_position not in (None, ""):
            position = normalize_slot(raw_position)
            if position is None:
                return Err(ValidationError(message=f"unknown position {raw_position!r}"))

        team_id = None
        if parse_id_ref(raw_team_id) is not None:
            team = self.get_team(raw_team_id)
            if isinstance(team, Err):
                return team
            team_id = team.value.id

        player_id = self._player_repo.insert(Player(name=name.value, team_id=team_id, position=position))
        logger.info("Created player %d (%s)", player_id, name.value)
        return self.get_player(player_id)

    def set_points(self, raw_player_id: object, raw_week: object, raw_points: object) -> Result[Player, LeagueError]:
        week = _required_week(raw_week)
        if isinstance(week, Err):
            return week
        points = coerce_points(raw_points)
        if points is None:
            return Err(ValidationError(message="points must be a number"))
        found = self.get_player(raw_player_id)
        if isinstance(found, Err):
            return found
        player_id = found.value.id
        assert player_id is not None
        self._player_repo.set_points(player_id, week.value, points)
        return self.get_player(player_id)
