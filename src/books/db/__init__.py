# ABOUTME: Public API for the books database layer.
# ABOUTME: Exports connection management, catalog operations, and data types.

from books.db.catalog import BookCatalog, ListFilter
from books.db.connection import (
    default_db_path,
    library_session,
    open_library,
    resolve_data_dir,
)
from books.db.mapping import BookRecord

__all__ = [
    "BookCatalog",
    "BookRecord",
    "ListFilter",
    "default_db_path",
    "library_session",
    "open_library",
    "resolve_data_dir",
]
