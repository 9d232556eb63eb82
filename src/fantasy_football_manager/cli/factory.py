import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from fantasy_football_manager.config import AppSettings
from fantasy_football_manager.db.connection import create_connection
from fantasy_football_manager.db.pool import ConnectionPool
from fantasy_football_manager.services import LeagueServices, build_league_services


@dataclass(frozen=True)
class LeagueContext:
    conn: sqlite3.Connection
    services: LeagueServices


@contextmanager
def build_league_context(settings: AppSettings) -> Iterator[LeagueContext]:
    """Composition-root context manager for one-shot league commands."""
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = create_connection(settings.db_path)
    try:
        yield LeagueContext(conn=conn, services=build_league_services(conn))
    finally:
        conn.close()


@contextmanager
def build_connection_pool(settings: AppSettings) -> Iterator[ConnectionPool]:
    """Pool shared by the HTTP server's request threads."""
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)
    pool = ConnectionPool(settings.db_path, size=settings.pool_size)
    try:
        yield pool
    finally:
        pool.close_all()
