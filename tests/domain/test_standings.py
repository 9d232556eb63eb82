from fantasy_football_manager.domain.standings import (
    RecordTotals,
    cumulative_record,
    format_ordinal,
    rank_standings,
    record_totals,
    streak_label,
)
from fantasy_football_manager.domain.team import Outcome, Team

W = Outcome.WIN
L = Outcome.LOSS


def _team(team_id: int, record: dict[str, Outcome]) -> Team:
    return Team(name=f"Team {team_id}", id=team_id, record=record)


class TestRecordTotals:
    def test_win_pct(self) -> None:
        totals = RecordTotals(wins=3, losses=1)
        assert totals.total_games == 4
        assert totals.win_pct == 0.75
        assert totals.label() == "3-1"

    def test_no_games(self) -> None:
        assert RecordTotals().win_pct == 0.0

    def test_record_totals(self) -> None:
        assert record_totals({"week1": W, "week2": L, "week3": W}) == RecordTotals(wins=2, losses=1)


class TestCumulativeRecord:
    def test_respects_week_bound(self) -> None:
        record = {"week1": W, "week2": L, "week5": W}
        assert cumulative_record(record, "week3") == RecordTotals(wins=1, losses=1)
        assert cumulative_record(record, "week5") == RecordTotals(wins=2, losses=1)

    def test_invalid_bound_counts_nothing(self) -> None:
        assert cumulative_record({"week1": W}, "preseason") == RecordTotals()


class TestStreakLabel:
    def test_trailing_run(self) -> None:
        assert streak_label({"week1": L, "week2": W, "week10": W, "week3": W}) == "W3"

    def test_single_loss(self) -> None:
        assert streak_label({"week1": W, "week2": L}) == "L1"

    def test_empty(self) -> None:
        assert streak_label({}) is None


class TestRankStandings:
    def test_competition_ranks(self) -> None:
        teams = [
            _team(1, {"week1": W, "week2": W, "week3": L}),
            _team(2, {"week1": W, "week2": W, "week3": W}),
            _team(3, {"week1": W, "week2": W, "week3": W}),
        ]
        rows = rank_standings(teams)
        assert [(row.team.id, row.rank) for row in rows] == [(2, 1), (3, 1), (1, 3)]

    def test_more_wins_break_equal_pct(self) -> None:
        teams = [_team(1, {"week1": W}), _team(2, {"week1": W, "week2": W})]
        rows = rank_standings(teams)
        assert [(row.team.id, row.rank) for row in rows] == [(2, 1), (1, 2)]

    def test_fewer_losses_break_equal_pct_and_wins(self) -> None:
        teams = [_team(1, {"week1": L}), _team(2, {})]
        rows = rank_standings(teams)
        assert [(row.team.id, row.rank) for row in rows] == [(2, 1), (1, 2)]

    def test_deterministic_across_calls(self) -> None:
        teams = [_team(n, {"week1": W}) for n in (5, 3, 4)]
        first = [row.team.id for row in rank_standings(teams)]
        second = [row.team.id for row in rank_standings(list(reversed(teams)))]
        assert first == second == [3, 4, 5]

    def test_through_week(self) -> None:
        teams = [_team(1, {"week1": L, "week2": W, "week3": W}), _team(2, {"week1": W, "week2": W, "week3": L})]
        rows = rank_standings(teams, through_week="week2")
        assert rows[0].team.id == 2
        assert rows[0].totals == RecordTotals(wins=2, losses=0)

    def test_streak_attached(self) -> None:
        rows = rank_standings([_team(1, {"week1": W, "week2": W})])
        assert rows[0].streak == "W2"


class TestFormatOrdinal:
    def test_suffixes(self) -> None:
        assert [format_ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 101, 111)] == [
            "1st",
            "2nd",
            "3rd",
            "4th",
            "11th",
            "12th",
            "13th",
            "21st",
            "22nd",
            "101st",
            "111th",
        ]
