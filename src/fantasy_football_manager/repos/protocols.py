from typing import Protocol, runtime_checkable

from fantasy_football_manager.domain.league_config import LeagueConfig
from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.slots import Slot
from fantasy_football_manager.domain.team import Outcome, Team


@runtime_checkable
class TeamRepo(Protocol):
    def insert(self, team: Team) -> int: ...

    def get_by_id(self, team_id: int) -> Team | None: ...

    def all(self) -> list[Team]: ...

    def set_record(self, team_id: int, week: str, outcome: Outcome) -> None: ...

    def set_lineup(self, team_id: int, week: str, lineup: dict[Slot, str]) -> None: ...

    def delete_lineup(self, team_id: int, week: str) -> None: ...


@runtime_checkable
class PlayerRepo(Protocol):
    def insert(self, player: Player) -> int: ...

    def get_by_id(self, player_id: int) -> Player | None: ...

    def get_by_team(self, team_id: int) -> list[Player]: ...

    def all(self) -> list[Player]: ...

    def set_points(self, player_id: int, week: str, points: float) -> None: ...


@runtime_checkable
class LeagueConfigRepo(Protocol):
    def get(self) -> LeagueConfig | None: ...

    def save(self, config: LeagueConfig) -> None: ...


@runtime_checkable
class MatchupRepo(Protocol):
    def get_all(self) -> dict[str, dict[int, int]]: ...

    def get_week(self, week: str) -> dict[int, int]: ...

    def replace_week(self, week: str, matchups: dict[int, int]) -> None: ...
