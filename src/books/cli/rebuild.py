# ABOUTME: Post-mutation hook that rebuilds the website when --website is given.
# ABOUTME: Build failures become warnings; the catalog change stands.

import logging
from pathlib import Path

from books.core.website import WebsiteBuilder, WebsiteBuildError

logger = logging.getLogger(__name__)


def rebuild_website(website_dir: Path | None) -> None:
    """Rebuild the website if one was configured, logging a warning on failure."""
    if website_dir is None:
        return
    try:
        WebsiteBuilder(website_dir).rebuild()
    except WebsiteBuildError as exc:
        logger.warning("Website rebuild failed: %s", exc)
