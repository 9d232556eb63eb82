import logging
from collections.abc import Callable
from typing import Any

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from fantasy_football_manager.db.pool import ConnectionPool
from fantasy_football_manager.domain.errors import LeagueError, NotFoundError, ValidationError
from fantasy_football_manager.domain.result import Err, Ok, Result
from fantasy_football_manager.services import LeagueServices, build_league_services
from fantasy_football_manager.web.serializers import (
    player_to_json,
    resolved_lineup_to_json,
    scoreboard_to_json,
    standings_to_json,
    team_summary_to_json,
    team_to_json,
)

logger = logging.getLogger(__name__)

_POOL_TIMEOUT_SECONDS = 5.0

type JsonResponse = tuple[Response, int]


def _error_response(error: LeagueError) -> JsonResponse:
    body: dict[str, Any] = {"message": error.message}
    if isinstance(error, ValidationError):
        if error.reason:
            body["reason"] = error.reason
        return jsonify(body), 400
    if isinstance(error, NotFoundError):
        return jsonify(body), 404
    return jsonify(body), 500


def _json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_app(pool: ConnectionPool) -> Flask:
    """Create the league API.

    Each request checks out one pooled connection. Writes commit only when the
    service call succeeds; anything left uncommitted is rolled back when the
    connection returns to the pool.
    """
    app = Flask(__name__)
    app.json.sort_keys = False  # type: ignore[attr-defined]

    @app.before_request
    def open_connection() -> None:
        g.conn = pool.get(timeout=_POOL_TIMEOUT_SECONDS)
        g.services = build_league_services(g.conn)

    @app.teardown_request
    def release_connection(exc: BaseException | None) -> None:
        conn = g.pop("conn", None)
        if conn is not None:
            pool.release(conn)

    def services() -> LeagueServices:
        return g.services

    def respond[T](
        result: Result[T, Any],
        serialize: Callable[[T], Any],
        *,
        status: int = 200,
        commit: bool = False,
    ) -> JsonResponse:
        match result:
            case Ok(value):
                if commit:
                    g.conn.commit()
                return jsonify(serialize(value)), status
            case Err(error):
                return _error_response(error)
        raise TypeError(f"Unexpected result {result!r}")

    def current_week() -> str:
        return services().current_week.get_current_week()

    # Teams -------------------------------------------------------------

    @app.get("/api/teams")
    def list_teams() -> JsonResponse:
        week = current_week()
        return jsonify([team_to_json(team, week) for team in services().roster.list_teams()]), 200

    @app.get("/api/teams/<team_id>")
    def get_team(team_id: str) -> JsonResponse:
        week = current_week()
        return respond(services().roster.get_team(team_id), lambda team: team_to_json(team, week))

    @app.post("/api/teams")
    def create_team() -> JsonResponse:
        body = _json_body()
        week = current_week()
        result = services().roster.create_team(body.get("name"))
        return respond(result, lambda team: team_to_json(team, week), status=201, commit=True)

    @app.patch("/api/teams/<team_id>/lineup")
    def set_lineup(team_id: str) -> JsonResponse:
        body = _json_body()
        week = current_week()
        result = services().roster.set_lineup(team_id, body.get("week"), body.get("lineup"))
        return respond(result, lambda team: team_to_json(team, week), commit=True)

    @app.get("/api/teams/<team_id>/lineups/<week>")
    def get_week_lineup(team_id: str, week: str) -> JsonResponse:
        result = services().roster.ensure_lineup(team_id, week)
        return respond(result, lambda resolved: resolved_lineup_to_json(week.strip().lower(), resolved), commit=True)

    @app.patch("/api/teams/<team_id>/record")
    def set_record(team_id: str) -> JsonResponse:
        body = _json_body()
        week = current_week()
        result = services().roster.set_record(team_id, body.get("week"), body.get("result"))
        return respond(result, lambda team: team_to_json(team, week), commit=True)

    @app.get("/api/teams/<team_id>/summary")
    def team_summary(team_id: str) -> JsonResponse:
        result = services().scoreboard.team_summary(team_id, request.args.get("week"))
        return respond(result, team_summary_to_json)

    # Players -----------------------------------------------------------

    @app.get("/api/players")
    def list_players() -> JsonResponse:
        players = services().roster.list_players(request.args.get("teamId"))
        return jsonify([player_to_json(player) for player in players]), 200

    @app.get("/api/players/<player_id>")
    def get_player(player_id: str) -> JsonResponse:
        return respond(services().roster.get_player(player_id), player_to_json)

    @app.post("/api/players")
    def create_player() -> JsonResponse:
        body = _json_body()
        result = services().roster.create_player(body.get("name"), body.get("teamId"), body.get("position"))
        return respond(result, player_to_json, status=201, commit=True)

    @app.patch("/api/players/<player_id>/points")
    def set_points(player_id: str) -> JsonResponse:
        body = _json_body()
        result = services().roster.set_points(player_id, body.get("week"), body.get("points"))
        return respond(result, player_to_json, commit=True)

    # League settings ---------------------------------------------------

    @app.get("/api/settings/current-week")
    def get_current_week() -> JsonResponse:
        return jsonify({"currentWeek": current_week()}), 200

    @app.patch("/api/settings/current-week")
    def set_current_week() -> JsonResponse:
        body = _json_body()
        raw_week = body.get("currentWeek", body.get("week"))
        result = services().current_week.set_current_week(raw_week)
        return respond(result, lambda week: {"currentWeek": week}, commit=True)

    # Matchups ----------------------------------------------------------

    @app.get("/api/matchups")
    def list_matchups() -> JsonResponse:
        return jsonify(services().matchups.get_all()), 200

    @app.get("/api/matchups/<week>")
    def get_week_matchups(week: str) -> JsonResponse:
        return respond(services().matchups.get_week(week), lambda matchups: matchups)

    @app.put("/api/matchups/<week>")
    def save_week_matchups(week: str) -> JsonResponse:
        data = request.get_json(silent=True)
        pairings = data.get("pairings") if isinstance(data, dict) else data
        result = services().matchups.save_week(week, pairings)
        return respond(result, lambda matchups: matchups, commit=True)

    # League views ------------------------------------------------------

    @app.get("/api/scoreboard")
    def scoreboard() -> JsonResponse:
        result = services().scoreboard.scoreboard(request.args.get("week"))
        return respond(result, lambda board: scoreboard_to_json(*board))

    @app.get("/api/standings")
    def standings() -> JsonResponse:
        result = services().scoreboard.standings(request.args.get("throughWeek"))
        return respond(result, standings_to_json)

    # Errors ------------------------------------------------------------

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException) -> JsonResponse:
        return jsonify({"message": exc.description}), exc.code or 500

    @app.errorhandler(Exception)
    def unexpected_error(exc: Exception) -> JsonResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"message": "Server error"}), 500

    return app
