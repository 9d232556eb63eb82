from collections.abc import Generator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from fantasy_football_manager.db.pool import ConnectionPool
from fantasy_football_manager.web.app import create_app


@pytest.fixture
def pool(tmp_path: Path) -> Generator[ConnectionPool]:
    connection_pool = ConnectionPool(tmp_path / "league.db", size=2)
    yield connection_pool
    connection_pool.close_all()


@pytest.fixture
def app(pool: ConnectionPool) -> Flask:
    return create_app(pool)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()
