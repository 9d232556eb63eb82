from fantasy_football_manager.domain.errors import ValidationError
from fantasy_football_manager.domain.league_config import LeagueConfig
from fantasy_football_manager.domain.result import Err, Ok
from fantasy_football_manager.services.current_week import CurrentWeekService
from tests.fakes.repos import FakeLeagueConfigRepo


class TestCurrentWeekService:
    def test_defaults_to_week1(self) -> None:
        assert CurrentWeekService(FakeLeagueConfigRepo()).get_current_week() == "week1"

    def test_reads_stored_week(self) -> None:
        repo = FakeLeagueConfigRepo(LeagueConfig(current_week="week6"))
        assert CurrentWeekService(repo).get_current_week() == "week6"

    def test_invalid_stored_week_falls_back(self) -> None:
        repo = FakeLeagueConfigRepo(LeagueConfig(current_week="garbage"))
        assert CurrentWeekService(repo).get_current_week() == "week1"

    def test_set_normalizes(self) -> None:
        repo = FakeLeagueConfigRepo()
        result = CurrentWeekService(repo).set_current_week(" Week7 ")
        assert result == Ok("week7")
        assert repo.config == LeagueConfig(current_week="week7")

    def test_invalid_write_leaves_value_unchanged(self) -> None:
        repo = FakeLeagueConfigRepo(LeagueConfig(current_week="week3"))
        service = CurrentWeekService(repo)
        result = service.set_current_week("seven")
        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert service.get_current_week() == "week3"
