# ABOUTME: books - a command-line reading tracker backed by SQLite.
# ABOUTME: Exposes the package version; functionality lives in db, core, and cli.

__version__ = "0.1.0"
