"""Identifier references as they arrive from clients and legacy exports.

Older payloads wrap ids in a reference object (``{"$oid": "..."}``) while
current clients send bare strings or integers. Both are parsed into an
explicit variant here so the rest of the code never inspects raw shapes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BareId:
    value: str


@dataclass(frozen=True)
class WrappedRef:
    value: str


type IdRef = BareId | WrappedRef


def parse_id_ref(raw: object) -> IdRef | None:
    match raw:
        case bool():
            return None
        case int():
            return BareId(str(raw))
        case str():
            stripped = raw.strip()
            return BareId(stripped) if stripped else None
        case {"$oid": str(oid)} if oid.strip():
            return WrappedRef(oid.strip())
        case _:
            return None


def _is_store_id(value: str) -> bool:
    return value.isascii() and value.isdigit()


def canonical_id(value: str) -> str:
    """Collapse spellings of one store id (``"007"`` -> ``"7"``); other ids pass through."""
    return str(int(value)) if _is_store_id(value) else value


def to_entity_id(raw: object) -> int | None:
    """Resolve a raw identifier to a store id; None when it cannot name a row."""
    ref = parse_id_ref(raw)
    if ref is None or not _is_store_id(ref.value):
        return None
    return int(ref.value)
