# ABOUTME: The `books show` command for displaying one book in detail.
# ABOUTME: Prints title, URL, dates, and the joined author list.

from pathlib import Path

import click

from books.cli.options import db_option
from books.cli.output import print_lines
from books.core.formatting import show_lines
from books.db.catalog import BookCatalog
from books.db.connection import library_session
from books.errors import NotFoundError


@click.command("show")
@click.argument("title")
@db_option
def show(title: str, db_path: Path | None) -> None:
    """Show a book."""
    with library_session(db_path) as conn:
        record = BookCatalog(conn).get_book(title)

    if record is None:
        raise NotFoundError(title)

    print_lines(show_lines(record))
