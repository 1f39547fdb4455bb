# ABOUTME: Exception hierarchy shared by the storage layer, formatters, and CLI.
# ABOUTME: Every failure the tool reports is a BooksError; the CLI maps it to exit status 1.


class BooksError(Exception):
    """Base class for all errors reported by books."""


class DataDirError(BooksError):
    """Raised when the data directory or database file cannot be set up."""


class NotFoundError(BooksError):
    """Raised when a command targets a title that is not in the catalog."""

    def __init__(self, title: str) -> None:
        super().__init__(f"not found: {title}")
        self.title = title


class DataFormatError(BooksError):
    """Raised when a stored value cannot be displayed (bad date, odd author count)."""


class UnsupportedAuthorCountError(DataFormatError):
    """Raised when an author list has no natural-language form (zero or four+ names)."""

    def __init__(self, count: int, title: str | None = None) -> None:
        where = f" for {title}" if title else ""
        super().__init__(f"unsupported number of authors{where}: {count}")
        self.count = count
        self.title = title


class StorageError(BooksError):
    """Raised when a database statement fails."""


class DuplicateBookError(StorageError):
    """Raised when adding or renaming to a title that already exists."""

    def __init__(self, title: str) -> None:
        super().__init__(f"already exists: {title}")
        self.title = title
