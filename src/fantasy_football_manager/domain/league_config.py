from dataclasses import dataclass

from fantasy_football_manager.domain.week import DEFAULT_WEEK


@dataclass(frozen=True)
class LeagueConfig:
    current_week: str = DEFAULT_WEEK
