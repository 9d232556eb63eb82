"""Lineup normalization, default construction and per-week resolution.

A stored lineup maps a slot to a player id string. Lineups are kept per week;
a week without its own entry inherits the nearest earlier week's lineup.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from fantasy_football_manager.domain.identifiers import parse_id_ref
from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.slots import LINEUP_SLOTS, Slot
from fantasy_football_manager.domain.week import parse_week_number, sort_weeks


class LineupSource(StrEnum):
    EXACT = "exact"
    CARRIED = "carried"
    DEFAULT = "default"
    EMPTY = "empty"


@dataclass(frozen=True)
class ResolvedLineup:
    source: LineupSource
    starters: dict[Slot, Player] = field(default_factory=dict)
    source_week: str | None = None

    def player_ids(self) -> dict[Slot, str]:
        return {slot: str(player.id) for slot, player in self.starters.items()}


def sanitize_lineup(raw: object) -> dict[Slot, str]:
    """Keep only canonical slots holding a non-blank player id."""
    if not isinstance(raw, Mapping):
        return {}
    cleaned: dict[Slot, str] = {}
    for slot in LINEUP_SLOTS:
        ref = parse_id_ref(raw.get(slot.value))
        if ref is not None:
            cleaned[slot] = ref.value
    return cleaned


def serialize_lineup(lineup: Mapping[str, object]) -> dict[str, str]:
    serialized: dict[str, str] = {}
    for slot in LINEUP_SLOTS:
        ref = parse_id_ref(lineup.get(slot.value))
        if ref is not None:
            serialized[slot.value] = ref.value
    return serialized


def serialize_lineups(lineups: Mapping[str, Mapping[str, object]]) -> dict[str, dict[str, str]]:
    serialized: dict[str, dict[str, str]] = {}
    for week in sort_weeks(lineups):
        entry = serialize_lineup(lineups[week])
        if entry:
            serialized[week] = entry
    return serialized


def build_default_lineup(roster: Sequence[Player]) -> dict[Slot, Player]:
    """Fill slots by matching position first, then with any unused player.

    Slots are visited in canonical order and the roster in listed order; the
    first match wins and each player starts at most once.
    """
    starters: dict[Slot, Player] = {}
    taken: set[int] = set()

    for slot in LINEUP_SLOTS:
        for index, player in enumerate(roster):
            if index not in taken and player.position == slot:
                starters[slot] = player
                taken.add(index)
                break

    for slot in LINEUP_SLOTS:
        if slot in starters:
            continue
        for index, player in enumerate(roster):
            if index not in taken:
                starters[slot] = player
                taken.add(index)
                break

    return {slot: starters[slot] for slot in LINEUP_SLOTS if slot in starters}


def pick_lineup_week(lineups: Mapping[str, object], week: str) -> str | None:
    """Return the week whose lineup applies to ``week``: exact, else nearest earlier."""
    if week in lineups:
        return week
    target = parse_week_number(week)
    if target is None:
        return None
    best: tuple[int, str] | None = None
    for key in lineups:
        number = parse_week_number(key)
        if number is None or number > target:
            continue
        if best is None or number > best[0]:
            best = (number, key)
    return best[1] if best else None


def lineup_for_week(lineups: Mapping[str, dict[Slot, str]], week: str) -> dict[Slot, str]:
    chosen = pick_lineup_week(lineups, week)
    return dict(lineups[chosen]) if chosen is not None else {}


def resolve_lineup(
    lineups: Mapping[str, Mapping[Slot, str]],
    week: str,
    roster: Sequence[Player] = (),
) -> ResolvedLineup:
    """Resolve the starters for ``week`` against the team's roster.

    Falls back to the default lineup only when no stored lineup applies.
    Stored ids that are not on the roster are ignored.
    """
    chosen = pick_lineup_week(lineups, week)
    if chosen is not None:
        source = LineupSource.EXACT if chosen == week else LineupSource.CARRIED
        return ResolvedLineup(source=source, starters=_starters_from_ids(lineups[chosen], roster), source_week=chosen)

    default = build_default_lineup(roster)
    if default:
        return ResolvedLineup(source=LineupSource.DEFAULT, starters=default)
    return ResolvedLineup(source=LineupSource.EMPTY)


def _starters_from_ids(ids: Mapping[Slot, str], roster: Sequence[Player]) -> dict[Slot, Player]:
    by_id = {str(player.id): player for player in roster if player.id is not None}
    starters: dict[Slot, Player] = {}
    for slot in LINEUP_SLOTS:
        player_id = ids.get(slot)
        if player_id is None:
            continue
        player = by_id.get(player_id)
        if player is not None:
            starters[slot] = player
    return starters
