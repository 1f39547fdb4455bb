# ABOUTME: CRUD operations for the books catalog.
# ABOUTME: Add, start, finish, rename, and query books and their authors in SQLite.

import logging
import sqlite3
from collections.abc import Callable
from datetime import date
from enum import Enum

from books.db.mapping import DATE_FORMAT, BookRecord, row_to_record
from books.errors import DuplicateBookError, NotFoundError, StorageError

logger = logging.getLogger(__name__)


class ListFilter(Enum):
    """Which titles `ls` shows, as (WHERE clause, ORDER BY clause)."""

    FINISHED = ("end_date IS NOT NULL", "end_date")
    STARTED = ("start_date IS NOT NULL AND end_date IS NULL", "title")
    WITHOUT_URL = ("url IS NULL", "title")
    UNSTARTED = ("start_date IS NULL", "title")

    @property
    def where(self) -> str:
        return self.value[0]

    @property
    def order_by(self) -> str:
        return self.value[1]

    @classmethod
    def from_flags(
        cls, *, finished: bool = False, started: bool = False, without_url: bool = False
    ) -> "ListFilter":
        """Pick a filter from command-line flags.

        Only one filter applies; when several flags are set the first of
        finished, started, without_url wins.
        """
        if finished:
            return cls.FINISHED
        if started:
            return cls.STARTED
        if without_url:
            return cls.WITHOUT_URL
        return cls.UNSTARTED


def _is_duplicate_title(exc: sqlite3.IntegrityError) -> bool:
    return "UNIQUE constraint failed: book.title" in str(exc)


class BookCatalog:
    """Wraps a sqlite3 connection and provides typed CRUD for books and authors."""

    def __init__(
        self, conn: sqlite3.Connection, today: Callable[[], date] = date.today
    ) -> None:
        self._conn = conn
        self._today = today

    def _today_text(self) -> str:
        return self._today().strftime(DATE_FORMAT)

    def _execute(
        self, sql: str, params: tuple = (), *, new_title: str | None = None
    ) -> sqlite3.Cursor:
        """Run one write statement in its own transaction, wrapping driver errors.

        new_title names the title the statement stores, so a UNIQUE violation
        on book.title can be reported as a duplicate of it.
        """
        try:
            with self._conn:
                return self._conn.execute(sql, params)
        except sqlite3.IntegrityError as exc:
            if new_title is not None and _is_duplicate_title(exc):
                raise DuplicateBookError(new_title) from exc
            raise StorageError(f"cannot execute statement: {exc}") from exc
        except sqlite3.Error as exc:
            raise StorageError(f"cannot execute statement: {exc}") from exc

    def _query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"cannot execute statement: {exc}") from exc

    def _update_one(self, sql: str, params: tuple, title: str, **kwargs: str) -> None:
        cursor = self._execute(sql, params, **kwargs)
        if cursor.rowcount != 1:
            raise NotFoundError(title)

    def add_book(self, title: str, authors: list[str], url: str | None = None) -> None:
        """Add a book and its authors in a single transaction.

        Raises:
            DuplicateBookError: If a book with this title already exists.
            StorageError: If any insert fails. Nothing is written in either case.
        """
        try:
            with self._conn:
                if url is None:
                    self._conn.execute("INSERT INTO book (title) VALUES (?)", (title,))
                else:
                    self._conn.execute(
                        "INSERT INTO book (title, url) VALUES (?, ?)", (title, url)
                    )
                self._conn.executemany(
                    "INSERT INTO author (title, author) VALUES (?, ?)",
                    [(title, author) for author in authors],
                )
        except sqlite3.IntegrityError as exc:
            if _is_duplicate_title(exc):
                raise DuplicateBookError(title) from exc
            raise StorageError(f"cannot execute statement: {exc}") from exc
        except sqlite3.Error as exc:
            raise StorageError(f"cannot execute statement: {exc}") from exc

        logger.debug("Added %r with %d author(s)", title, len(authors))

    def start_book(self, title: str) -> None:
        """Set a book's start date to today.

        Raises:
            NotFoundError: If no book has this title.
        """
        self._update_one(
            "UPDATE book SET start_date = ? WHERE title = ?",
            (self._today_text(), title),
            title,
        )

    def finish_book(self, title: str) -> None:
        """Set a book's end date to today. The book need not have been started.

        Raises:
            NotFoundError: If no book has this title.
        """
        self._update_one(
            "UPDATE book SET end_date = ? WHERE title = ?",
            (self._today_text(), title),
            title,
        )

    def rename_book(self, old_title: str, new_title: str) -> None:
        """Change a book's title. Author rows follow through ON UPDATE CASCADE.

        Raises:
            NotFoundError: If no book has old_title.
            DuplicateBookError: If new_title is already taken.
        """
        self._update_one(
            "UPDATE book SET title = ? WHERE title = ?",
            (new_title, old_title),
            old_title,
            new_title=new_title,
        )
        logger.debug("Renamed %r to %r", old_title, new_title)

    def set_url(self, title: str, url: str) -> None:
        """Set or replace a book's URL.

        Raises:
            NotFoundError: If no book has this title.
        """
        self._update_one("UPDATE book SET url = ? WHERE title = ?", (url, title), title)

    def delete_book(self, title: str) -> None:
        """Delete a book; its authors are removed through ON DELETE CASCADE.

        Raises:
            NotFoundError: If no book has this title.
        """
        self._update_one("DELETE FROM book WHERE title = ?", (title,), title)

    def list_titles(self, list_filter: ListFilter = ListFilter.UNSTARTED) -> list[str]:
        """Return titles matching the filter in the filter's order."""
        rows = self._query(
            f"SELECT title FROM book WHERE {list_filter.where} ORDER BY {list_filter.order_by}"
        )
        return [row["title"] for row in rows]

    def get_authors(self, title: str) -> list[str]:
        """Get a book's authors, alphabetically sorted."""
        rows = self._query("SELECT author FROM author WHERE title = ? ORDER BY author", (title,))
        return [row["author"] for row in rows]

    def get_book(self, title: str) -> BookRecord | None:
        """Retrieve a book and its authors by title."""
        rows = self._query(
            "SELECT title, url, start_date, end_date FROM book WHERE title = ?", (title,)
        )
        return row_to_record(rows[0], self.get_authors(title)) if rows else None

    def list_for_render(self, complete: bool = False) -> list[BookRecord]:
        """Return the books shown on the website.

        Unfinished books come back ordered by title; with complete=True,
        finished books come back ordered by end date (ties by title).
        """
        if complete:
            sql = (
                "SELECT title, url, start_date, end_date FROM book "
                "WHERE end_date IS NOT NULL ORDER BY end_date, title"
            )
        else:
            sql = (
                "SELECT title, url, start_date, end_date FROM book "
                "WHERE end_date IS NULL ORDER BY title"
            )
        return [row_to_record(row, self.get_authors(row["title"])) for row in self._query(sql)]
