from dataclasses import dataclass, field
from enum import StrEnum

from fantasy_football_manager.domain.slots import Slot


class Outcome(StrEnum):
    WIN = "W"
    LOSS = "L"


@dataclass(frozen=True)
class Team:
    name: str
    id: int | None = None
    lineups: dict[str, dict[Slot, str]] = field(default_factory=dict)
    record: dict[str, Outcome] = field(default_factory=dict)
