# ABOUTME: The `books mv` command for changing a book's title.
# ABOUTME: Author rows follow the new title through the foreign key cascade.

from pathlib import Path

import click

from books.cli.options import db_option, website_option
from books.cli.output import print_line
from books.cli.rebuild import rebuild_website
from books.db.catalog import BookCatalog
from books.db.connection import library_session


@click.command("mv")
@click.argument("old_title")
@click.argument("new_title")
@db_option
@website_option
def mv(old_title: str, new_title: str, db_path: Path | None, website_dir: Path | None) -> None:
    """Change a book's title."""
    with library_session(db_path) as conn:
        BookCatalog(conn).rename_book(old_title, new_title)

    print_line(f"Renamed {old_title} to {new_title}.")
    rebuild_website(website_dir)
