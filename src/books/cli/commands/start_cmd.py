# ABOUTME: The `books start` command for marking a book as started today.

from pathlib import Path

import click

from books.cli.options import db_option, website_option
from books.cli.output import print_line
from books.cli.rebuild import rebuild_website
from books.db.catalog import BookCatalog
from books.db.connection import library_session


@click.command("start")
@click.argument("title")
@db_option
@website_option
def start(title: str, db_path: Path | None, website_dir: Path | None) -> None:
    """Start reading a book."""
    with library_session(db_path) as conn:
        BookCatalog(conn).start_book(title)

    print_line(f"Started {title}.")
    rebuild_website(website_dir)
