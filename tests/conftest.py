# ABOUTME: Shared pytest fixtures for books tests.
# ABOUTME: Provides temporary databases, a fixed-date catalog, and a CLI invoker.

from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from books.cli import cli
from books.db.catalog import BookCatalog
from books.db.connection import open_library

TODAY = date(2026, 10, 17)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a database file that does not exist yet."""
    return tmp_path / "data" / "books.sqlite3"


@pytest.fixture
def catalog(db_path: Path):
    """A BookCatalog on a fresh database whose clock always reads TODAY."""
    conn = open_library(db_path)
    yield BookCatalog(conn, today=lambda: TODAY)
    conn.close()


@pytest.fixture
def app_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the per-user application directory at a temporary location."""
    target = tmp_path / "appdir" / "books"
    monkeypatch.setattr(
        "books.db.connection.platformdirs.user_data_dir",
        lambda appname, appauthor=None: str(target),
    )
    return target


@pytest.fixture
def run(db_path: Path) -> Callable[..., Result]:
    """Invoke the CLI against the temporary database."""
    runner = CliRunner()

    def invoke(*args: str) -> Result:
        return runner.invoke(cli, [*args, "--db", str(db_path)])

    return invoke
