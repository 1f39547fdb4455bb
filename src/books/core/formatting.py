# ABOUTME: Display formatting for books: author lists, dates, detail lines, HTML items.
# ABOUTME: Pure functions over BookRecord; raise DataFormatError instead of guessing.

import html
from datetime import date

from books.db.mapping import BookRecord, parse_stored_date
from books.errors import DataFormatError, UnsupportedAuthorCountError

# Spelled out so rendered dates do not depend on the locale, as %B does
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def join_authors(authors: list[str], title: str | None = None) -> str:
    """Join author names the way they read in English.

    One name is returned as-is, two become "A and B", and three become
    "A, B, and C". Other counts have no agreed form and are rejected rather
    than truncated.

    Raises:
        UnsupportedAuthorCountError: For zero or more than three authors.
    """
    if len(authors) == 1:
        return authors[0]
    if len(authors) == 2:
        return f"{authors[0]} and {authors[1]}"
    if len(authors) == 3:
        return f"{authors[0]}, {authors[1]}, and {authors[2]}"
    raise UnsupportedAuthorCountError(len(authors), title)


def format_date(value: date | str, title: str) -> str:
    """Render a date as "Month Day, Year", e.g. "October 7, 2026".

    Accepts a date or stored YYYY-MM-DD text.

    Raises:
        DataFormatError: If the text cannot be parsed.
    """
    if isinstance(value, str):
        parsed = parse_stored_date(value, title)
    else:
        parsed = value
    if not isinstance(parsed, date):
        raise DataFormatError(f"invalid date {value!r} for {title}")
    return f"{MONTH_NAMES[parsed.month - 1]} {parsed.day}, {parsed.year}"


def show_lines(record: BookRecord) -> list[str]:
    """Lines printed by `books show`."""
    lines = [f"Title: {record.title}"]
    if record.url:
        lines.append(f"URL: {record.url}")
    if record.start_date:
        lines.append(f"Started: {record.start_date.isoformat()}")
    if record.end_date:
        lines.append(f"Finished: {record.end_date.isoformat()}")
    lines.append(f"Authors: {join_authors(record.authors, record.title)}")
    return lines


def render_item(record: BookRecord, show_date: bool = False) -> str:
    """Render one book as an HTML list item for the website."""
    title = f"<em>{html.escape(record.title, quote=False)}</em>"
    if record.url:
        title = f'<a href="{html.escape(record.url)}">{title}</a>'
    authors = html.escape(join_authors(record.authors, record.title), quote=False)

    item = f"<li>{title} by {authors}"
    if show_date and record.end_date is not None:
        item += f", finished {format_date(record.end_date, record.title)}"
    return item + "</li>"
