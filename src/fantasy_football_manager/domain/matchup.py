"""Weekly head-to-head pairings.

A week's pairings are stored as a symmetric map: every team id points at its
opponent's id. Validation runs in a fixed order: structure, self-pairing,
then duplicate participation. Ids are compared in canonical form, so
``"01"`` and ``"1"`` name the same team.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from fantasy_football_manager.domain.errors import ValidationError
from fantasy_football_manager.domain.identifiers import canonical_id, parse_id_ref
from fantasy_football_manager.domain.result import Err, Ok, Result

REASON_STRUCTURE = "structure"
REASON_SELF_PAIRING = "self_pairing"
REASON_DUPLICATE_TEAM = "duplicate_team"
REASON_UNKNOWN_TEAM = "unknown_team"


@dataclass(frozen=True)
class Pairing:
    team_a: str
    team_b: str


def parse_pairings(raw: object) -> Result[list[Pairing], ValidationError]:
    if not isinstance(raw, list):
        return Err(ValidationError(message="pairings must be a list", reason=REASON_STRUCTURE))

    pairings: list[Pairing] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            return Err(ValidationError(message=f"pairing {index} must be an object", reason=REASON_STRUCTURE))
        team_a = parse_id_ref(entry.get("teamA"))
        team_b = parse_id_ref(entry.get("teamB"))
        if team_a is None or team_b is None:
            return Err(
                ValidationError(message=f"pairing {index} needs both teamA and teamB", reason=REASON_STRUCTURE)
            )
        pairings.append(Pairing(team_a=canonical_id(team_a.value), team_b=canonical_id(team_b.value)))

    for pairing in pairings:
        if pairing.team_a == pairing.team_b:
            return Err(
                ValidationError(
                    message=f"team {pairing.team_a} cannot be matched against itself",
                    reason=REASON_SELF_PAIRING,
                )
            )

    seen: set[str] = set()
    for pairing in pairings:
        for team_id in (pairing.team_a, pairing.team_b):
            if team_id in seen:
                return Err(
                    ValidationError(
                        message=f"team {team_id} appears in more than one pairing",
                        reason=REASON_DUPLICATE_TEAM,
                    )
                )
            seen.add(team_id)

    return Ok(pairings)


def build_matchup_map(pairings: list[Pairing]) -> dict[str, str]:
    matchups: dict[str, str] = {}
    for pairing in pairings:
        matchups[pairing.team_a] = pairing.team_b
        matchups[pairing.team_b] = pairing.team_a
    return matchups
