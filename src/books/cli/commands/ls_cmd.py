# ABOUTME: The `books ls` command for listing titles.
# ABOUTME: Lists unstarted books by default; flags select finished, started, or URL-less books.

from pathlib import Path

import click

from books.cli.options import db_option
from books.cli.output import print_lines
from books.db.catalog import BookCatalog, ListFilter
from books.db.connection import library_session


@click.command("ls")
@click.option(
    "--finished",
    is_flag=True,
    default=False,
    help="List finished books instead of unstarted ones.",
)
@click.option(
    "--started",
    is_flag=True,
    default=False,
    help="List started books instead of unstarted ones.",
)
@click.option(
    "--without-url",
    is_flag=True,
    default=False,
    help="List books with no URL.",
)
@db_option
def ls(finished: bool, started: bool, without_url: bool, db_path: Path | None) -> None:
    """List books.

    With more than one flag, --finished beats --started, which beats --without-url.
    """
    list_filter = ListFilter.from_flags(
        finished=finished, started=started, without_url=without_url
    )
    with library_session(db_path) as conn:
        titles = BookCatalog(conn).list_titles(list_filter)

    print_lines(titles)
