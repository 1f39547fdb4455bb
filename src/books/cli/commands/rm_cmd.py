# ABOUTME: The `books rm` command for deleting a book.
# ABOUTME: Authors are removed with it; re-adding is the only way to clear its dates.

from pathlib import Path

import click

from books.cli.options import db_option, website_option
from books.cli.output import print_line
from books.cli.rebuild import rebuild_website
from books.db.catalog import BookCatalog
from books.db.connection import library_session


@click.command("rm")
@click.argument("title")
@db_option
@website_option
def rm(title: str, db_path: Path | None, website_dir: Path | None) -> None:
    """Delete a book and its authors."""
    with library_session(db_path) as conn:
        BookCatalog(conn).delete_book(title)

    print_line(f"Removed {title}.")
    rebuild_website(website_dir)
