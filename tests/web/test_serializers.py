from fantasy_football_manager.domain.lineup import LineupSource, ResolvedLineup
from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.slots import Slot
from fantasy_football_manager.domain.team import Outcome, Team
from fantasy_football_manager.web.serializers import player_to_json, resolved_lineup_to_json, team_to_json


class TestTeamToJson:
    def test_ids_are_strings_and_weeks_sorted(self) -> None:
        team = Team(
            name="Sharks",
            id=3,
            lineups={"week10": {Slot.KICKING: "8"}, "week2": {Slot.PASSING: "7"}},
            record={"week10": Outcome.LOSS, "week2": Outcome.WIN},
        )
        body = team_to_json(team, "week5")
        assert body["id"] == "3"
        assert list(body["lineups"]) == ["week2", "week10"]
        assert list(body["record"]) == ["week2", "week10"]
        assert body["record"]["week10"] == "L"
        assert body["lineup"] == {"Passing": "7"}


class TestPlayerToJson:
    def test_free_agent(self) -> None:
        body = player_to_json(Player(name="Casey", id=4))
        assert body == {"id": "4", "name": "Casey", "teamId": None, "points": {}, "position": None}


class TestResolvedLineupToJson:
    def test_starters_carry_week_points(self) -> None:
        ace = Player(name="Ace", id=1, team_id=1, points={"week2": 6.5})
        resolved = ResolvedLineup(source=LineupSource.CARRIED, starters={Slot.PASSING: ace}, source_week="week1")
        body = resolved_lineup_to_json("week2", resolved)
        assert body == {
            "week": "week2",
            "source": "carried",
            "sourceWeek": "week1",
            "lineup": {"Passing": "1"},
            "starters": {"Passing": {"id": "1", "name": "Ace", "points": 6.5}},
        }
