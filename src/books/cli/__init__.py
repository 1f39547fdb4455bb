# ABOUTME: CLI package for books, built on Click.
# ABOUTME: Defines the root command group, logging setup, and the single error exit path.

import logging
from typing import Any

import click
from rich.logging import RichHandler

from books import __version__
from books.cli.commands import (
    add_cmd,
    finish_cmd,
    ls_cmd,
    mv_cmd,
    render_cmd,
    rm_cmd,
    set_url_cmd,
    show_cmd,
    start_cmd,
)
from books.cli.output import err_console
from books.errors import BooksError

logger = logging.getLogger(__name__)

PROG_NAME = "books"


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich; DEBUG with --verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


class BooksGroup(click.Group):
    """Root group that turns any BooksError into `books: MESSAGE` and exit status 1."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except BooksError as exc:
            logger.debug("Command failed", exc_info=exc)
            click.echo(f"{PROG_NAME}: {exc}", err=True)
            ctx.exit(1)


@click.group(cls=BooksGroup)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """books - track what you read and render it for your website."""
    configure_logging(verbose)


cli.add_command(add_cmd.add)
cli.add_command(finish_cmd.finish)
cli.add_command(finish_cmd.finish, name="read")
cli.add_command(ls_cmd.ls)
cli.add_command(mv_cmd.mv)
cli.add_command(render_cmd.render)
cli.add_command(rm_cmd.rm)
cli.add_command(set_url_cmd.set_url)
cli.add_command(show_cmd.show)
cli.add_command(start_cmd.start)
