import logging

from fantasy_football_manager.domain.errors import ValidationError
from fantasy_football_manager.domain.league_config import LeagueConfig
from fantasy_football_manager.domain.result import Err, Ok, Result
from fantasy_football_manager.domain.week import DEFAULT_WEEK, normalize_week
from fantasy_football_manager.repos.protocols import LeagueConfigRepo

logger = logging.getLogger(__name__)


class CurrentWeekService:
    """Reads and writes the league's active week."""

    def __init__(self, config_repo: LeagueConfigRepo) -> None:
        self._config_repo = config_repo

    def get_current_week(self) -> str:
        config = self._config_repo.get()
        if config is None:
            return DEFAULT_WEEK
        week = normalize_week(config.current_week)
        if week is None:
            logger.warning("Stored current week %r is invalid; using %s", config.current_week, DEFAULT_WEEK)
            return DEFAULT_WEEK
        return week

    def set_current_week(self, raw_week: object) -> Result[str, ValidationError]:
        week = normalize_week(raw_week)
        if week is None:
            return Err(ValidationError(message=f"invalid week {raw_week!r}: expected 'week<number>'"))
        self._config_repo.save(LeagueConfig(current_week=week))
        logger.info("Current week set to %s", week)
        return Ok(week)
