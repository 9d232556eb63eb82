import logging

from fantasy_football_manager.domain.errors import ValidationError
from fantasy_football_manager.domain.identifiers import to_entity_id
from fantasy_football_manager.domain.matchup import REASON_UNKNOWN_TEAM, build_matchup_map, parse_pairings
from fantasy_football_manager.domain.result import Err, Ok, Result
from fantasy_football_manager.domain.week import normalize_week, sort_weeks
from fantasy_football_manager.repos.protocols import MatchupRepo, TeamRepo

logger = logging.getLogger(__name__)


def _stringify(matchups: dict[int, int]) -> dict[str, str]:
    return {str(team_id): str(opponent_id) for team_id, opponent_id in matchups.items()}


class MatchupService:
    def __init__(self, matchup_repo: MatchupRepo, team_repo: TeamRepo) -> None:
        self._matchup_repo = matchup_repo
        self._team_repo = team_repo

    def get_all(self) -> dict[str, dict[str, str]]:
        """Every stored week's pairings; rows under an unreadable week key are skipped."""
        stored = self._matchup_repo.get_all()
        matchups: dict[str, dict[str, str]] = {}
        for week in sort_weeks(stored):
            if normalize_week(week) != week:
                logger.warning("Skipping matchups stored under invalid week %r", week)
                continue
            matchups[week] = _stringify(stored[week])
        return matchups

    def get_week(self, raw_week: object) -> Result[dict[str, str], ValidationError]:
        week = normalize_week(raw_week)
        if week is None:
            return Err(ValidationError(message=f"invalid week {raw_week!r}: expected 'week<number>'"))
        return Ok(_stringify(self._matchup_repo.get_week(week)))

    def save_week(self, raw_week: object, raw_pairings: object) -> Result[dict[str, str], ValidationError]:
        """Replace a week's pairings; an empty list clears the week."""
        week = normalize_week(raw_week)
        if week is None:
            return Err(ValidationError(message=f"invalid week {raw_week!r}: expected 'week<number>'"))
        parsed = parse_pairings(raw_pairings)
        if isinstance(parsed, Err):
            return parsed

        matchup_map = build_matchup_map(parsed.value)
        team_ids: dict[str, int] = {}
        for team_ref in matchup_map:
            team_id = to_entity_id(team_ref)
            if team_id is None or self._team_repo.get_by_id(team_id) is None:
                return Err(ValidationError(message=f"unknown team {team_ref}", reason=REASON_UNKNOWN_TEAM))
            team_ids[team_ref] = team_id
        matchups = {team_ids[team_ref]: team_ids[opponent_ref] for team_ref, opponent_ref in matchup_map.items()}

        self._matchup_repo.replace_week(week, matchups)
        logger.info("Saved %d pairings for %s", len(matchups) // 2, week)
        return Ok(_stringify(matchups))
