# ABOUTME: Terminal output for books commands: verbatim data lines, paging, and the stderr console.
# ABOUTME: Stored values are echoed byte-for-byte; long output goes through a pager on a TTY.

import sys
from collections.abc import Iterable

import click
from rich.console import Console

err_console = Console(stderr=True, emoji=False, highlight=False)


def print_line(text: str) -> None:
    """Print one line exactly as given: no markup, no wrapping, tabs kept."""
    click.echo(text)


def print_lines(lines: Iterable[str]) -> None:
    """Print lines verbatim, through the user's pager when stdout is interactive."""
    lines = list(lines)
    if lines and sys.stdout.isatty():
        # echo_via_pager appends the final newline itself
        click.echo_via_pager("\n".join(lines))
        return
    for line in lines:
        print_line(line)
