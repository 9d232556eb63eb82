from dataclasses import dataclass


@dataclass(frozen=True)
class LeagueError:
    message: str


@dataclass(frozen=True)
class ValidationError(LeagueError):
    reason: str | None = None


@dataclass(frozen=True)
class NotFoundError(LeagueError):
    entity: str = ""
    entity_id: str = ""


def not_found(entity: str, entity_id: object) -> NotFoundError:
    return NotFoundError(
        message=f"{entity.capitalize()} not found",
        entity=entity,
        entity_id=str(entity_id),
    )
