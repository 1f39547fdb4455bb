# ABOUTME: Converts SQLite rows from the book and author tables into BookRecord.
# ABOUTME: Parses stored YYYY-MM-DD text into dates and names the book on failure.

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from books.errors import DataFormatError

DATE_FORMAT = "%Y-%m-%d"


@dataclass
class BookRecord:
    """A tracked book with its authors and reading dates."""

    title: str
    authors: list[str] = field(default_factory=list)
    url: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    @property
    def is_started(self) -> bool:
        return self.start_date is not None

    @property
    def is_finished(self) -> bool:
        return self.end_date is not None


def parse_stored_date(value: str | None, title: str) -> date | None:
    """Parse a stored date column, passing NULL through as None.

    Raises:
        DataFormatError: If the text is not a YYYY-MM-DD calendar date.
    """
    if value is None:
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise DataFormatError(f"invalid date {value!r} for {title}") from exc


def row_to_record(row: Any, authors: list[str]) -> BookRecord:
    """Convert a book row (dict-like) and its author names to a BookRecord."""
    title = row["title"]
    return BookRecord(
        title=title,
        authors=list(authors),
        url=row["url"],
        start_date=parse_stored_date(row["start_date"], title),
        end_date=parse_stored_date(row["end_date"], title),
    )
