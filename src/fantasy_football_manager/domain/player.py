import math
from dataclasses import dataclass, field

from fantasy_football_manager.domain.slots import Slot


@dataclass(frozen=True)
class Player:
    name: str
    id: int | None = None
    team_id: int | None = None
    points: dict[str, float] = field(default_factory=dict)
    position: Slot | None = None

    def points_for(self, week: str) -> float:
        return self.points.get(week, 0.0)


def coerce_points(raw: object) -> float | None:
    """Return ``raw`` as a finite float, or None for booleans, non-numbers and values a float cannot hold."""
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        return None
    try:
        points = float(raw)
    except OverflowError:
        return None
    return points if math.isfinite(points) else None
