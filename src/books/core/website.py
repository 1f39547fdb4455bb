# ABOUTME: Rebuilds the personal website after the catalog changes.
# ABOUTME: Runs make in the website project directory; failures are reported, not fatal.

import logging
import subprocess
from pathlib import Path

from books.errors import BooksError

logger = logging.getLogger(__name__)


class WebsiteBuildError(BooksError):
    """Raised when the website build tool cannot be run or exits non-zero."""


class WebsiteBuilder:
    """Runs the website's build tool against a project directory.

    The catalog is never rolled back when a build fails; callers decide how
    loudly to report a WebsiteBuildError.
    """

    def __init__(self, project_dir: Path, *, make: str = "make") -> None:
        self.project_dir = project_dir
        self.make = make

    @property
    def command(self) -> list[str]:
        return [self.make, "-C", str(self.project_dir)]

    def rebuild(self) -> None:
        """Run the build and wait for it.

        Raises:
            WebsiteBuildError: If the tool is missing or exits with non-zero status.
        """
        logger.debug("Rebuilding website: %s", " ".join(self.command))
        try:
            result = subprocess.run(self.command, check=False)
        except OSError as exc:
            raise WebsiteBuildError(f"cannot run {self.make}: {exc}") from exc

        if result.returncode != 0:
            raise WebsiteBuildError(
                f"{self.make} exited with status {result.returncode} in {self.project_dir}"
            )
