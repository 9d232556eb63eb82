from dataclasses import replace

from fantasy_football_manager.domain.league_config import LeagueConfig
from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.slots import Slot
from fantasy_football_manager.domain.team import Outcome, Team


class FakeTeamRepo:
    def __init__(self, teams: list[Team] | None = None) -> None:
        self._teams: dict[int, Team] = {}
        for team in teams or []:
            self.insert(team)

    def insert(self, team: Team) -> int:
        team_id = team.id if team.id is not None else max(self._teams, default=0) + 1
        self._teams[team_id] = replace(
            team,
            id=team_id,
            record=dict(team.record),
            lineups={week: dict(lineup) for week, lineup in team.lineups.items() if lineup},
        )
        return team_id

    def get_by_id(self, team_id: int) -> Team | None:
        return self._teams.get(team_id)

    def all(self) -> list[Team]:
        return [self._teams[team_id] for team_id in sorted(self._teams)]

    def set_record(self, team_id: int, week: str, outcome: Outcome) -> None:
        team = self._teams[team_id]
        self._teams[team_id] = replace(team, record={**team.record, week: outcome})

    def set_lineup(self, team_id: int, week: str, lineup: dict[Slot, str]) -> None:
        team = self._teams[team_id]
        self._teams[team_id] = replace(team, lineups={**team.lineups, week: dict(lineup)})

    def delete_lineup(self, team_id: int, week: str) -> None:
        team = self._teams[team_id]
        self._teams[team_id] = replace(team, lineups={k: v for k, v in team.lineups.items() if k != week})


class FakePlayerRepo:
    def __init__(self, players: list[Player] | None = None) -> None:
        self._players: dict[int, Player] = {}
        for player in players or []:
            self.insert(player)

    def insert(self, player: Player) -> int:
        player_id = player.id if player.id is not None else max(self._players, default=0) + 1
        self._players[player_id] = replace(player, id=player_id, points=dict(player.points))
        return player_id

    def get_by_id(self, player_id: int) -> Player | None:
        return self._players.get(player_id)

    def get_by_team(self, team_id: int) -> list[Player]:
        return [p for p in self.all() if p.team_id == team_id]

    def all(self) -> list[Player]:
        return [self._players[player_id] for player_id in sorted(self._players)]

    def set_points(self, player_id: int, week: str, points: float) -> None:
        player = self._players[player_id]
        self._players[player_id] = replace(player, points={**player.points, week: points})


class FakeLeagueConfigRepo:
    def __init__(self, config: LeagueConfig | None = None) -> None:
        self.config = config

    def get(self) -> LeagueConfig | None:
        return self.config

    def save(self, config: LeagueConfig) -> None:
        self.config = config


class FakeMatchupRepo:
    def __init__(self, matchups: dict[str, dict[int, int]] | None = None) -> None:
        self._matchups: dict[str, dict[int, int]] = {week: dict(m) for week, m in (matchups or {}).items()}

    def get_all(self) -> dict[str, dict[int, int]]:
        return {week: dict(m) for week, m in self._matchups.items()}

    def get_week(self, week: str) -> dict[int, int]:
        return dict(self._matchups.get(week, {}))

    def replace_week(self, week: str, matchups: dict[int, int]) -> None:
        if matchups:
            self._matchups[week] = dict(matchups)
        else:
            self._matchups.pop(week, None)
