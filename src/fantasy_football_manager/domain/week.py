"""Week keys partition every per-week value: points, records, lineups and matchups.

A week key is ``week`` followed by one or more ASCII digits. Input is
case-insensitive and surrounding whitespace is ignored; the canonical form is
lowercase (``" Week3 "`` -> ``"week3"``).
"""

import re
from collections.abc import Iterable

DEFAULT_WEEK = "week1"

_WEEK_PATTERN = re.compile(r"week([0-9]+)")


def normalize_week(raw: object) -> str | None:
    """Return the canonical week key, or None when ``raw`` is not one."""
    if not isinstance(raw, str):
        return None
    candidate = raw.strip().lower()
    if _WEEK_PATTERN.fullmatch(candidate) is None:
        return None
    return candidate


def parse_week_number(week: str) -> int | None:
    match = _WEEK_PATTERN.fullmatch(week.strip().lower())
    return int(match.group(1)) if match else None


def week_key(number: int) -> str:
    return f"week{number}"


def sort_weeks(weeks: Iterable[str]) -> list[str]:
    """Order week keys chronologically; keys without a week number sort last."""

    def _key(week: str) -> tuple[int, int, str]:
        number = parse_week_number(week)
        if number is None:
            return (1, 0, week)
        return (0, number, week)

    return sorted(weeks, key=_key)
