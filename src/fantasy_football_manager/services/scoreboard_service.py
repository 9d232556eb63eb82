from fantasy_football_manager.domain.errors import LeagueError, ValidationError
from fantasy_football_manager.domain.result import Err, Ok, Result
from fantasy_football_manager.domain.scoring import TeamScore, TeamSummary, build_scoreboard, score_team, summarize_team
from fantasy_football_manager.domain.standings import StandingsRow, rank_standings
from fantasy_football_manager.domain.week import normalize_week
from fantasy_football_manager.repos.protocols import MatchupRepo, PlayerRepo
from fantasy_football_manager.services.current_week import CurrentWeekService
from fantasy_football_manager.services.roster_service import RosterService


class ScoreboardService:
    """Read-only league views: weekly scoreboard, standings and team summaries.

    Every view is recomputed from stored teams, players and matchups on each
    call. When no week is given the league's current week is used.
    """

    def __init__(
        self,
        roster: RosterService,
        player_repo: PlayerRepo,
        matchup_repo: MatchupRepo,
        current_week: CurrentWeekService,
    ) -> None:
        self._roster = roster
        self._player_repo = player_repo
        self._matchup_repo = matchup_repo
        self._current_week = current_week

    def _resolve_week(self, raw_week: object) -> Result[str, ValidationError]:
        if raw_week is None or raw_week == "":
            return Ok(self._current_week.get_current_week())
        week = normalize_week(raw_week)
        if week is None:
            return Err(ValidationError(message=f"invalid week {raw_week!r}: expected 'week<number>'"))
        return Ok(week)

    def scoreboard(self, raw_week: object = None) -> Result[tuple[str, list[TeamScore]], ValidationError]:
        week = self._resolve_week(raw_week)
        if isinstance(week, Err):
            return week
        scores = build_scoreboard(self._roster.list_teams(), self._player_repo.all(), week.value)
        return Ok((week.value, scores))

    def standings(self, raw_through_week: object = None) -> Result[list[StandingsRow], ValidationError]:
        through_week = None
        if raw_through_week is not None and raw_through_week != "":
            through_week = normalize_week(raw_through_week)
            if through_week is None:
                return Err(ValidationError(message=f"invalid week {raw_through_week!r}: expected 'week<number>'"))
        return Ok(rank_standings(self._roster.list_teams(), through_week=through_week))

    def team_summary(self, raw_team_id: object, raw_week: object = None) -> Result[TeamSummary, LeagueError]:
        week = self._resolve_week(raw_week)
        if isinstance(week, Err):
            return week
        found = self._roster.get_team(raw_team_id)
        if isinstance(found, Err):
            return found
        team = found.value
        assert team.id is not None

        opponent: TeamScore | None = None
        opponent_id = self._matchup_repo.get_week(week.value).get(team.id)
        if opponent_id is not None:
            opponent_team = self._roster.get_team(opponent_id)
            if isinstance(opponent_team, Ok):
                opponent = score_team(opponent_team.value, self._player_repo.get_by_team(opponent_id), week.value)

        roster = self._player_repo.get_by_team(team.id)
        return Ok(summarize_team(team, roster, week.value, opponent))
