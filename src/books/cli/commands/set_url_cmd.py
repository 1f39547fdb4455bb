# ABOUTME: The `books set-url` command for setting or replacing a book's URL.

from pathlib import Path

import click

from books.cli.options import db_option, website_option
from books.cli.output import print_line
from books.cli.rebuild import rebuild_website
from books.db.catalog import BookCatalog
from books.db.connection import library_session


@click.command("set-url")
@click.argument("title")
@click.argument("url")
@db_option
@website_option
def set_url(title: str, url: str, db_path: Path | None, website_dir: Path | None) -> None:
    """Set a book's URL."""
    with library_session(db_path) as conn:
        BookCatalog(conn).set_url(title, url)

    print_line(f"Set URL of {title}.")
    rebuild_website(website_dir)
