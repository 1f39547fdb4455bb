# ABOUTME: End-to-end tests for the books CLI.
# ABOUTME: Full reading workflows via Click's CliRunner with a real database file.

from datetime import date
from pathlib import Path

from click.testing import CliRunner

from books.cli import cli


class TestReadingLifecycle:
    """E2E tests for add -> start -> finish -> show."""

    def test_dune_lifecycle(self, run) -> None:
        """Show after start and finish prints both dates and the author."""
        today = date.today().isoformat()

        assert run("add", "Dune", "Frank Herbert").exit_code == 0
        assert run("ls").output.splitlines() == ["Dune"]

        assert run("start", "Dune").exit_code == 0
        assert run("ls").output == ""
        assert run("ls", "--started").output.splitlines() == ["Dune"]

        assert run("finish", "Dune").exit_code == 0
        assert run("ls", "--started").output == ""
        assert run("ls", "--finished").output.splitlines() == ["Dune"]

        result = run("show", "Dune")
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Title: Dune",
            f"Started: {today}",
            f"Finished: {today}",
            "Authors: Frank Herbert",
        ]

    def test_add_then_show_reports_author_set(self, run) -> None:
        run("add", "Good Omens", "Terry Pratchett", "Neil Gaiman")
        result = run("show", "Good Omens")
        assert result.output.splitlines() == [
            "Title: Good Omens",
            "Authors: Neil Gaiman and Terry Pratchett",
        ]

    def test_duplicate_add_keeps_original_authors(self, run) -> None:
        run("add", "Dune", "Frank Herbert")
        result = run("add", "Dune", "Brian Herbert", "Kevin J. Anderson")
        assert result.exit_code == 1
        assert run("show", "Dune").output.splitlines()[-1] == "Authors: Frank Herbert"


class TestRenameWorkflow:
    def test_rename_moves_authors(self, run) -> None:
        run("add", "A", "Ann", "Bob")
        assert run("mv", "A", "B").exit_code == 0

        result = run("show", "B")
        assert "Authors: Ann and Bob" in result.output

        result = run("show", "A")
        assert result.exit_code == 1
        assert "books: not found: A" in result.output


class TestRenderWorkflow:
    def test_render_unfinished_alphabetical_authors(self, run) -> None:
        run("add", "Good Omens", "Terry Pratchett", "Neil Gaiman")
        result = run("render")
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "<li><em>Good Omens</em> by Neil Gaiman and Terry Pratchett</li>"
        ]

    def test_render_with_url_and_finished_split(self, run) -> None:
        run("add", "Dune", "Frank Herbert", "--url", "https://example.org/dune")
        run("add", "Emma", "Jane Austen")
        run("read", "Emma")

        assert run("render").output.splitlines() == [
            '<li><a href="https://example.org/dune"><em>Dune</em></a> by Frank Herbert</li>'
        ]
        complete = run("render", "--complete").output.splitlines()
        assert len(complete) == 1
        assert complete[0].startswith("<li><em>Emma</em> by Jane Austen, finished ")

    def test_render_four_authors_is_an_error(self, run) -> None:
        run("add", "Big Book", "A", "B", "C", "D")
        result = run("render")
        assert result.exit_code == 1
        assert "unsupported number of authors" in result.output


class TestSeparateDatabases:
    def test_db_option_isolates_libraries(self, tmp_path: Path) -> None:
        runner = CliRunner()
        first = tmp_path / "first.db"
        second = tmp_path / "second.db"

        runner.invoke(cli, ["add", "Dune", "Frank Herbert", "--db", str(first)])

        assert runner.invoke(cli, ["ls", "--db", str(first)]).output.splitlines() == ["Dune"]
        assert runner.invoke(cli, ["ls", "--db", str(second)]).output == ""
