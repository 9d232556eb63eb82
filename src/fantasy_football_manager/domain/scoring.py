"""Weekly scoring: starter totals, leading scorers, the scoreboard and team summaries."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from fantasy_football_manager.domain.lineup import LineupSource, resolve_lineup
from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.slots import LINEUP_SLOTS, Slot
from fantasy_football_manager.domain.standings import RecordTotals, cumulative_record
from fantasy_football_manager.domain.team import Outcome, Team


@dataclass(frozen=True)
class TeamScore:
    team: Team
    week: str
    starters: dict[Slot, Player]
    starter_total: float
    leading_scorer: Player | None
    leading_points: float
    lineup_source: LineupSource


@dataclass(frozen=True)
class TeamSummary:
    score: TeamScore
    record: RecordTotals
    week_result: Outcome | None
    bench: list[Player] = field(default_factory=list)
    bench_total: float = 0.0
    opponent: TeamScore | None = None


def starter_total(starters: Mapping[Slot, Player], week: str) -> float:
    return sum(player.points_for(week) for player in starters.values())


def leading_scorer(starters: Mapping[Slot, Player], week: str) -> tuple[Player | None, float]:
    """Highest-scoring starter; ties go to the earlier slot. No starters -> (None, 0.0)."""
    leader: Player | None = None
    best = 0.0
    for slot in LINEUP_SLOTS:
        player = starters.get(slot)
        if player is None:
            continue
        points = player.points_for(week)
        if leader is None or points > best:
            leader = player
            best = points
    return leader, best


def score_team(team: Team, roster: Sequence[Player], week: str) -> TeamScore:
    resolved = resolve_lineup(team.lineups, week, roster)
    leader, leading_points = leading_scorer(resolved.starters, week)
    return TeamScore(
        team=team,
        week=week,
        starters=resolved.starters,
        starter_total=starter_total(resolved.starters, week),
        leading_scorer=leader,
        leading_points=leading_points,
        lineup_source=resolved.source,
    )


def group_rosters(players: Sequence[Player]) -> dict[int, list[Player]]:
    rosters: dict[int, list[Player]] = {}
    for player in players:
        if player.team_id is not None:
            rosters.setdefault(player.team_id, []).append(player)
    return rosters


def build_scoreboard(teams: Sequence[Team], players: Sequence[Player], week: str) -> list[TeamScore]:
    """Score every team for ``week``, highest starter total first (ties by team id)."""
    rosters = group_rosters(players)
    scores = [score_team(team, rosters.get(team.id or 0, []), week) for team in teams]
    return sorted(scores, key=lambda s: (-s.starter_total, s.team.id or 0))


def summarize_team(
    team: Team,
    roster: Sequence[Player],
    week: str,
    opponent: TeamScore | None = None,
) -> TeamSummary:
    score = score_team(team, roster, week)
    starter_ids = {id(player) for player in score.starters.values()}
    bench = [player for player in roster if id(player) not in starter_ids]
    return TeamSummary(
        score=score,
        record=cumulative_record(team.record, week),
        week_result=team.record.get(week),
        bench=bench,
        bench_total=sum(player.points_for(week) for player in bench),
        opponent=opponent,
    )
