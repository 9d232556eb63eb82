from fantasy_football_manager.domain.lineup import (
    LineupSource,
    build_default_lineup,
    lineup_for_week,
    pick_lineup_week,
    resolve_lineup,
    sanitize_lineup,
    serialize_lineups,
)
from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.slots import LINEUP_SLOTS, Slot, normalize_slot


def _player(player_id: int, position: Slot | None = None, name: str | None = None) -> Player:
    return Player(name=name or f"Player {player_id}", id=player_id, team_id=1, position=position)


class TestSlots:
    def test_canonical_order(self) -> None:
        assert [s.value for s in LINEUP_SLOTS] == ["Passing", "Rushing", "Receiving", "Defense", "Kicking"]

    def test_normalize_slot(self) -> None:
        assert normalize_slot("Kicking") is Slot.KICKING
        assert normalize_slot("kicking") is None
        assert normalize_slot(None) is None


class TestSanitizeLineup:
    def test_drops_unknown_and_blank_entries(self) -> None:
        raw = {"Passing": "p1", "Bogus": "x", "Rushing": "  "}
        assert sanitize_lineup(raw) == {Slot.PASSING: "p1"}

    def test_accepts_wrapped_and_numeric_ids(self) -> None:
        raw = {"Passing": {"$oid": "7"}, "Kicking": 9}
        assert sanitize_lineup(raw) == {Slot.PASSING: "7", Slot.KICKING: "9"}

    def test_non_mapping_is_empty(self) -> None:
        assert sanitize_lineup(["Passing"]) == {}
        assert sanitize_lineup(None) == {}


class TestBuildDefaultLineup:
    def test_matching_positions_fill_first(self) -> None:
        roster = [_player(1, Slot.KICKING), _player(2, Slot.PASSING), _player(3, Slot.RUSHING)]
        lineup = build_default_lineup(roster)
        assert lineup[Slot.PASSING].id == 2
        assert lineup[Slot.RUSHING].id == 3
        assert lineup[Slot.KICKING].id == 1

    def test_unmatched_slots_take_remaining_players_in_roster_order(self) -> None:
        roster = [_player(1, Slot.PASSING), _player(2, Slot.PASSING), _player(3)]
        lineup = build_default_lineup(roster)
        assert lineup[Slot.PASSING].id == 1
        assert lineup[Slot.RUSHING].id == 2
        assert lineup[Slot.RECEIVING].id == 3
        assert Slot.DEFENSE not in lineup

    def test_each_player_starts_once(self) -> None:
        roster = [_player(n) for n in range(1, 8)]
        lineup = build_default_lineup(roster)
        assert len(lineup) == 5
        assert len({p.id for p in lineup.values()}) == 5

    def test_empty_roster(self) -> None:
        assert build_default_lineup([]) == {}

    def test_result_in_canonical_slot_order(self) -> None:
        roster = [_player(1, Slot.KICKING), _player(2, Slot.PASSING)]
        assert list(build_default_lineup(roster)) == [Slot.PASSING, Slot.KICKING]


class TestPickLineupWeek:
    def test_exact_week(self) -> None:
        assert pick_lineup_week({"week1": {}, "week3": {}}, "week3") == "week3"

    def test_nearest_earlier_week(self) -> None:
        assert pick_lineup_week({"week1": {}, "week3": {}, "week9": {}}, "week5") == "week3"

    def test_no_earlier_week(self) -> None:
        assert pick_lineup_week({"week4": {}}, "week2") is None

    def test_lineup_for_week_copies(self) -> None:
        lineups = {"week1": {Slot.PASSING: "1"}}
        found = lineup_for_week(lineups, "week2")
        found[Slot.RUSHING] = "2"
        assert lineups["week1"] == {Slot.PASSING: "1"}


class TestResolveLineup:
    def test_exact(self) -> None:
        roster = [_player(1), _player(2)]
        resolved = resolve_lineup({"week2": {Slot.RUSHING: "2"}}, "week2", roster)
        assert resolved.source is LineupSource.EXACT
        assert resolved.source_week == "week2"
        assert resolved.starters == {Slot.RUSHING: roster[1]}

    def test_carried_from_earlier_week(self) -> None:
        roster = [_player(1)]
        resolved = resolve_lineup({"week1": {Slot.PASSING: "1"}}, "week4", roster)
        assert resolved.source is LineupSource.CARRIED
        assert resolved.source_week == "week1"
        assert resolved.player_ids() == {Slot.PASSING: "1"}

    def test_ids_off_the_roster_are_ignored(self) -> None:
        resolved = resolve_lineup({"week1": {Slot.PASSING: "99"}}, "week1", [_player(1)])
        assert resolved.source is LineupSource.EXACT
        assert resolved.starters == {}

    def test_default_when_nothing_stored(self) -> None:
        roster = [_player(1, Slot.RUSHING)]
        resolved = resolve_lineup({}, "week1", roster)
        assert resolved.source is LineupSource.DEFAULT
        assert resolved.starters == {Slot.RUSHING: roster[0]}

    def test_empty_without_roster(self) -> None:
        resolved = resolve_lineup({}, "week1")
        assert resolved.source is LineupSource.EMPTY
        assert resolved.starters == {}


class TestSerializeLineups:
    def test_weeks_sorted_and_empty_dropped(self) -> None:
        lineups = {"week10": {Slot.PASSING: "1"}, "week2": {}, "week1": {Slot.KICKING: "3"}}
        assert serialize_lineups(lineups) == {"week1": {"Kicking": "3"}, "week10": {"Passing": "1"}}
        assert list(serialize_lineups(lineups)) == ["week1", "week10"]
