"""Win/loss totals, streaks and league standings.

Standings order teams by win percentage, then wins, then fewer losses. Teams
level on all three share a rank and the next group skips ahead (1, 1, 3).
Within a shared rank, teams are listed by id.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from fantasy_football_manager.domain.team import Outcome, Team
from fantasy_football_manager.domain.week import parse_week_number, sort_weeks, week_key


@dataclass(frozen=True)
class RecordTotals:
    wins: int = 0
    losses: int = 0

    @property
    def total_games(self) -> int:
        return self.wins + self.losses

    @property
    def win_pct(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.wins / self.total_games

    def label(self) -> str:
        return f"{self.wins}-{self.losses}"


@dataclass(frozen=True)
class StandingsRow:
    team: Team
    rank: int
    totals: RecordTotals
    streak: str | None


def _tally(results: list[str]) -> RecordTotals:
    return RecordTotals(
        wins=sum(1 for r in results if r == Outcome.WIN),
        losses=sum(1 for r in results if r == Outcome.LOSS),
    )


def record_totals(record: Mapping[str, str]) -> RecordTotals:
    return _tally(list(record.values()))


def cumulative_record(record: Mapping[str, str], through_week: str) -> RecordTotals:
    """Count results for week1..N where N is the number in ``through_week``.

    Results stored for later weeks are excluded. An unparseable week counts nothing.
    """
    last = parse_week_number(through_week)
    if last is None:
        return RecordTotals()
    results = [record[week_key(n)] for n in range(1, last + 1) if week_key(n) in record]
    return _tally(results)


def streak_label(record: Mapping[str, str]) -> str | None:
    """Trailing run of identical results ending at the latest week, e.g. ``"W3"``."""
    if not record:
        return None
    ordered = [record[week] for week in sort_weeks(record)]
    final = ordered[-1]
    count = 0
    for result in reversed(ordered):
        if result != final:
            break
        count += 1
    return f"{final}{count}"


def rank_standings(teams: Sequence[Team], *, through_week: str | None = None) -> list[StandingsRow]:
    def _totals(team: Team) -> RecordTotals:
        if through_week is None:
            return record_totals(team.record)
        return cumulative_record(team.record, through_week)

    decorated = [(team, _totals(team)) for team in teams]
    decorated.sort(key=lambda pair: (-pair[1].win_pct, -pair[1].wins, pair[1].losses, pair[0].id or 0))

    rows: list[StandingsRow] = []
    previous: tuple[float, int, int] | None = None
    rank = 0
    for index, (team, totals) in enumerate(decorated):
        key = (totals.win_pct, totals.wins, totals.losses)
        if key != previous:
            rank = index + 1
            previous = key
        rows.append(StandingsRow(team=team, rank=rank, totals=totals, streak=streak_label(team.record)))
    return rows


def format_ordinal(rank: int) -> str:
    if 11 <= rank % 100 <= 13:
        return f"{rank}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(rank % 10, "th")
    return f"{rank}{suffix}"
