# ABOUTME: The `books add` command for adding a book and its authors.
# ABOUTME: Inserts the book, optional URL, and author rows in one transaction.

from pathlib import Path

import click

from books.cli.options import db_option, website_option
from books.cli.output import print_line
from books.cli.rebuild import rebuild_website
from books.db.catalog import BookCatalog
from books.db.connection import library_session


@click.command("add")
@click.argument("title")
@click.argument("authors", metavar="AUTHOR...", nargs=-1, required=True)
@click.option("--url", default=None, help="URL of the book.")
@db_option
@website_option
def add(
    title: str,
    authors: tuple[str, ...],
    url: str | None,
    db_path: Path | None,
    website_dir: Path | None,
) -> None:
    """Add a book with one or more authors."""
    with library_session(db_path) as conn:
        BookCatalog(conn).add_book(title, list(authors), url=url)

    print_line(f"Added {title}.")
    rebuild_website(website_dir)
