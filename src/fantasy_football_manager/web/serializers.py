"""JSON shapes for the HTTP API. Store ids always leave as strings."""

from typing import Any

from fantasy_football_manager.domain.lineup import ResolvedLineup, lineup_for_week, serialize_lineup, serialize_lineups
from fantasy_football_manager.domain.player import Player
from fantasy_football_manager.domain.scoring import TeamScore, TeamSummary
from fantasy_football_manager.domain.standings import StandingsRow
from fantasy_football_manager.domain.team import Team
from fantasy_football_manager.domain.week import sort_weeks


def _id(value: int | None) -> str | None:
    return str(value) if value is not None else None


def team_to_json(team: Team, current_week: str) -> dict[str, Any]:
    return {
        "id": _id(team.id),
        "name": team.name,
        "lineup": serialize_lineup(lineup_for_week(team.lineups, current_week)),
        "lineups": serialize_lineups(team.lineups),
        "record": {week: team.record[week].value for week in sort_weeks(team.record)},
    }


def player_to_json(player: Player) -> dict[str, Any]:
    return {
        "id": _id(player.id),
        "name": player.name,
        "teamId": _id(player.team_id),
        "points": {week: player.points[week] for week in sort_weeks(player.points)},
        "position": player.position.value if player.position else None,
    }


def _player_ref(player: Player | None, week: str) -> dict[str, Any] | None:
    if player is None:
        return None
    return {"id": _id(player.id), "name": player.name, "points": player.points_for(week)}


def team_score_to_json(score: TeamScore) -> dict[str, Any]:
    return {
        "teamId": _id(score.team.id),
        "name": score.team.name,
        "starterTotal": score.starter_total,
        "leadingScorer": _player_ref(score.leading_scorer, score.week),
        "leadingPoints": score.leading_points,
        "lineupSource": score.lineup_source.value,
    }


def scoreboard_to_json(week: str, scores: list[TeamScore]) -> dict[str, Any]:
    return {"week": week, "teams": [team_score_to_json(score) for score in scores]}


def standings_to_json(rows: list[StandingsRow]) -> list[dict[str, Any]]:
    return [
        {
            "rank": row.rank,
            "teamId": _id(row.team.id),
            "name": row.team.name,
            "wins": row.totals.wins,
            "losses": row.totals.losses,
            "totalGames": row.totals.total_games,
            "winPct": round(row.totals.win_pct, 3),
            "streak": row.streak,
        }
        for row in rows
    ]


def resolved_lineup_to_json(week: str, resolved: ResolvedLineup) -> dict[str, Any]:
    return {
        "week": week,
        "source": resolved.source.value,
        "sourceWeek": resolved.source_week,
        "lineup": serialize_lineup(resolved.player_ids()),
        "starters": {slot.value: _player_ref(player, week) for slot, player in resolved.starters.items()},
    }


def team_summary_to_json(summary: TeamSummary) -> dict[str, Any]:
    score = summary.score
    opponent = summary.opponent
    return {
        "teamId": _id(score.team.id),
        "name": score.team.name,
        "week": score.week,
        "record": {"wins": summary.record.wins, "losses": summary.record.losses},
        "weekResult": summary.week_result.value if summary.week_result else None,
        "starters": {slot.value: _player_ref(player, score.week) for slot, player in score.starters.items()},
        "starterTotal": score.starter_total,
        "bench": [_player_ref(player, score.week) for player in summary.bench],
        "benchTotal": summary.bench_total,
        "leadingScorer": _player_ref(score.leading_scorer, score.week),
        "opponent": (
            {"teamId": _id(opponent.team.id), "name": opponent.team.name, "starterTotal": opponent.starter_total}
            if opponent is not None
            else None
        ),
    }
