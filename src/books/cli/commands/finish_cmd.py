# ABOUTME: The `books finish` command (also registered as `books read`).
# ABOUTME: Sets a book's end date to today whether or not it was started.

from pathlib import Path

import click

from books.cli.options import db_option, website_option
from books.cli.output import print_line
from books.cli.rebuild import rebuild_website
from books.db.catalog import BookCatalog
from books.db.connection import library_session


@click.command("finish")
@click.argument("title")
@db_option
@website_option
def finish(title: str, db_path: Path | None, website_dir: Path | None) -> None:
    """Finish reading a book."""
    with library_session(db_path) as conn:
        BookCatalog(conn).finish_book(title)

    print_line(f"Finished {title}.")
    rebuild_website(website_dir)
