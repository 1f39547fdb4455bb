# ABOUTME: Shared Click options for books CLI commands.
# ABOUTME: Provides reusable decorators for --db and --website.

from pathlib import Path

import click

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the books database (default: database.sqlite3 in the per-user data directory).",
)

website_option = click.option(
    "--website",
    "website_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Website project to rebuild with make after a successful change.",
)
