import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from fantasy_football_manager.cli._logging import configure_logging
from fantasy_football_manager.cli._output import (
    console,
    print_current_week,
    print_error,
    print_import_summary,
    print_scoreboard,
    print_standings,
)
from fantasy_football_manager.cli.factory import build_connection_pool, build_league_context
from fantasy_football_manager.config import AppSettings, create_config, load_app_settings
from fantasy_football_manager.domain.result import Err, Ok
from fantasy_football_manager.services.legacy_import import LegacyImportError
from fantasy_football_manager.web.app import create_app

logger = logging.getLogger(__name__)

app = typer.Typer(name="ffm", help="Fantasy Football Manager: league server and tools")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Fantasy Football Manager: league server and tools."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_ConfigOpt = Annotated[str, typer.Option("--config", help="Path to the YAML config file")]
_DbOpt = Annotated[Path | None, typer.Option("--db", help="League database path (overrides config)")]


def _load_settings(config_path: str, db_path: Path | None) -> AppSettings:
    try:
        settings = load_app_settings(create_config(yaml_path=config_path))
    except ValueError as e:
        print_error(f"invalid configuration: {e}")
        raise typer.Exit(code=1) from e
    if db_path is not None:
        settings = AppSettings(
            db_path=db_path.expanduser(),
            pool_size=settings.pool_size,
            host=settings.host,
            port=settings.port,
            debug=settings.debug,
        )
    return settings


@app.command()
def serve(
    config_path: _ConfigOpt = "ffm.yaml",
    db_path: _DbOpt = None,
    host: Annotated[str | None, typer.Option("--host", help="Interface to bind")] = None,
    port: Annotated[int | None, typer.Option("--port", help="Port to listen on")] = None,
) -> None:
    """Run the league HTTP API."""
    settings = _load_settings(config_path, db_path)
    bind_host = host or settings.host
    bind_port = port or settings.port
    with build_connection_pool(settings) as pool:
        flask_app = create_app(pool)
        logger.info("Serving league %s on http://%s:%d", settings.db_path, bind_host, bind_port)
        flask_app.run(host=bind_host, port=bind_port, debug=settings.debug, threaded=True, use_reloader=False)


@app.command("import-legacy")
def import_legacy(
    source: Annotated[Path, typer.Argument(help="JSON export with teams, players and settings")],
    config_path: _ConfigOpt = "ffm.yaml",
    db_path: _DbOpt = None,
) -> None:
    """Load a legacy league export into the database."""
    if not source.is_file():
        print_error(f"file not found: {source}")
        raise typer.Exit(code=1)
    try:
        document = json.loads(source.read_text())
    except json.JSONDecodeError as e:
        print_error(f"{source} is not valid JSON: {e}")
        raise typer.Exit(code=1) from e

    settings = _load_settings(config_path, db_path)
    with build_league_context(settings) as ctx:
        try:
            summary = ctx.services.legacy_importer.import_document(document)
        except LegacyImportError as e:
            ctx.conn.rollback()
            print_error(str(e))
            raise typer.Exit(code=1) from e
        ctx.conn.commit()
    print_import_summary(summary)


@app.command()
def standings(
    through_week: Annotated[str | None, typer.Option("--through-week", help="Count results up to this week")] = None,
    config_path: _ConfigOpt = "ffm.yaml",
    db_path: _DbOpt = None,
) -> None:
    """Print league standings."""
    settings = _load_settings(config_path, db_path)
    with build_league_context(settings) as ctx:
        match ctx.services.scoreboard.standings(through_week):
            case Ok(rows):
                print_standings(rows, through_week.strip().lower() if through_week else None)
            case Err(e):
                print_error(e.message)
                raise typer.Exit(code=1)


@app.command()
def scoreboard(
    week: Annotated[str | None, typer.Option("--week", help="Week to score (default: current week)")] = None,
    config_path: _ConfigOpt = "ffm.yaml",
    db_path: _DbOpt = None,
) -> None:
    """Print each team's starter points for a week."""
    settings = _load_settings(config_path, db_path)
    with build_league_context(settings) as ctx:
        match ctx.services.scoreboard.scoreboard(week):
            case Ok((scored_week, scores)):
                print_scoreboard(scored_week, scores)
            case Err(e):
                print_error(e.message)
                raise typer.Exit(code=1)


@app.command("current-week")
def current_week(
    week: Annotated[str | None, typer.Argument(help="New current week, e.g. week5")] = None,
    config_path: _ConfigOpt = "ffm.yaml",
    db_path: _DbOpt = None,
) -> None:
    """Show the league's current week, or set it when WEEK is given."""
    settings = _load_settings(config_path, db_path)
    with build_league_context(settings) as ctx:
        if week is None:
            print_current_week(ctx.services.current_week.get_current_week())
            return
        match ctx.services.current_week.set_current_week(week):
            case Ok(saved):
                ctx.conn.commit()
                console.print(f"[bold green]Updated[/bold green] current week to [bold]{saved}[/bold]")
            case Err(e):
                print_error(e.message)
                raise typer.Exit(code=1)
