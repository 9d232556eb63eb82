import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_MIGRATIONS_DIR = Path(__file__).parent / "migrations"

# Request threads share one league file; writers wait for the lock instead of failing.
BUSY_TIMEOUT_MS = 5000


@dataclass(frozen=True)
class Migration:
    version: int
    name: str
    statements: tuple[str, ...]


def create_connection(
    path: str | Path,
    *,
    check_same_thread: bool = True,
    migrations_dir: Path | None = None,
) -> sqlite3.Connection:
    """Open a league database and bring its schema up to date.

    File databases use WAL so the API's readers never block on a writer.
    Foreign keys are on for every connection; SQLite defaults them off.
    """
    conn = sqlite3.connect(str(path), check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    conn.execute(f"PRAGMA busy_timeout={BUSY_TIMEOUT_MS}")
    if str(path) != ":memory:":
        conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")

    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_version ("
        "    version INTEGER PRIMARY KEY,"
        "    applied_at TEXT NOT NULL DEFAULT (datetime('now'))"
        ")"
    )
    current = get_schema_version(conn)
    for migration in load_migrations(migrations_dir or _MIGRATIONS_DIR):
        if migration.version > current:
            _apply_migration(conn, migration)
    return conn


def get_schema_version(conn: sqlite3.Connection) -> int:
    """Return the current schema version, or 0 if no migrations have run."""
    try:
        row = conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
    except sqlite3.OperationalError:
        return 0
    return row[0] if row and row[0] is not None else 0


def load_migrations(directory: Path) -> list[Migration]:
    """Read ``NNN_name.sql`` files in version order; each file is split into statements on ``;``."""
    migrations: dict[int, Migration] = {}
    for sql_file in directory.glob("*.sql"):
        number, _, name = sql_file.stem.partition("_")
        version = int(number)
        if version in migrations:
            raise ValueError(f"duplicate migration version {version}: {migrations[version].name}, {sql_file.name}")
        statements = tuple(s.strip() for s in sql_file.read_text().split(";") if s.strip())
        migrations[version] = Migration(version=version, name=sql_file.name, statements=statements)
    return [migrations[version] for version in sorted(migrations)]


def _apply_migration(conn: sqlite3.Connection, migration: Migration) -> None:
    logger.info("Applying league schema migration %s", migration.name)
    # DDL only joins the transaction under manual BEGIN/COMMIT.
    isolation = conn.isolation_level
    conn.isolation_level = None
    try:
        conn.execute("BEGIN")
        for statement in migration.statements:
            conn.execute(statement)
        conn.execute("INSERT INTO schema_version (version) VALUES (?)", (migration.version,))
        conn.execute("COMMIT")
    except sqlite3.Error:
        conn.execute("ROLLBACK")
        raise
    finally:
        conn.isolation_level = isolation
