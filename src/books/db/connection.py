# ABOUTME: SQLite connection management for the books database.
# ABOUTME: Resolves the per-user data directory, opens the file, and applies the schema.

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import platformdirs

from books.db.schema import SCHEMA
from books.errors import DataDirError

logger = logging.getLogger(__name__)

APP_NAME = "books"
APP_AUTHOR = "org.ftbfs"
DEFAULT_DB_NAME = "database.sqlite3"
DATA_DIR_MODE = 0o700


def resolve_data_dir() -> Path:
    """Return the per-user application data directory for books.

    Raises:
        DataDirError: If the user's home directory cannot be determined.
    """
    data_dir = Path(platformdirs.user_data_dir(APP_NAME, APP_AUTHOR))
    # expanduser leaves "~" in place when there is no home to expand to
    if not data_dir.is_absolute() or "~" in data_dir.parts:
        raise DataDirError("cannot determine home directory")
    return data_dir


def default_db_path() -> Path:
    """Location of the database when --db is not given."""
    return resolve_data_dir() / DEFAULT_DB_NAME


def ensure_data_dir(path: Path) -> Path:
    """Create the data directory with owner-only permissions if it is missing.

    Raises:
        DataDirError: If the directory cannot be created.
    """
    try:
        path.mkdir(mode=DATA_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise DataDirError(f"cannot create {path}: {exc}") from exc
    return path


def open_library(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the books database.

    Creates the data directory if needed, applies the schema (idempotent), and
    enables foreign key enforcement so author rows cascade with their book.

    Args:
        path: Path to the database file. Defaults to the per-user data directory.

    Returns:
        A configured sqlite3.Connection with sqlite3.Row rows.

    Raises:
        DataDirError: If any step of the setup fails.
    """
    db_path = path or default_db_path()
    ensure_data_dir(db_path.parent)

    try:
        conn = sqlite3.connect(str(db_path))
    except sqlite3.Error as exc:
        raise DataDirError(f"cannot open {db_path}: {exc}") from exc

    try:
        conn.row_factory = sqlite3.Row
        conn.executescript(SCHEMA)
        conn.execute("PRAGMA foreign_keys=ON")
    except sqlite3.Error as exc:
        conn.close()
        raise DataDirError(f"cannot initialize {db_path}: {exc}") from exc

    logger.debug("Opened database %s", db_path)
    return conn


@contextmanager
def library_session(path: Path | None = None) -> Iterator[sqlite3.Connection]:
    """Open the library for the duration of one command and always close it."""
    conn = open_library(path)
    try:
        yield conn
    finally:
        conn.close()
