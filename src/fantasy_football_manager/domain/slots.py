from enum import StrEnum


class Slot(StrEnum):
    PASSING = "Passing"
    RUSHING = "Rushing"
    RECEIVING = "Receiving"
    DEFENSE = "Defense"
    KICKING = "Kicking"


# Canonical order: lineup iteration, serialization and tie-breaks all follow it.
LINEUP_SLOTS: tuple[Slot, ...] = tuple(Slot)


def normalize_slot(value: object) -> Slot | None:
    if not isinstance(value, str):
        return None
    try:
        return Slot(value)
    except ValueError:
        return None
