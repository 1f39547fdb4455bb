# ABOUTME: The `books render` command for producing website HTML.
# ABOUTME: Emits one <li> per book: unfinished books, or finished ones with --complete.

from pathlib import Path

import click

from books.cli.options import db_option
from books.cli.output import print_lines
from books.core.formatting import render_item
from books.db.catalog import BookCatalog
from books.db.connection import library_session


@click.command("render")
@click.option(
    "--complete",
    is_flag=True,
    default=False,
    help="Render finished books, with their completion dates.",
)
@db_option
def render(complete: bool, db_path: Path | None) -> None:
    """Render books as HTML list items."""
    with library_session(db_path) as conn:
        records = BookCatalog(conn).list_for_render(complete=complete)

    # Format everything first so a bad record produces no partial output
    items = [render_item(record, show_date=complete) for record in records]
    print_lines(items)
