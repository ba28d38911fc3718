"""Recursive reconstruction of a remote folder on local disk."""

import logging
from pathlib import Path

from gh import ContentKind, GitHubClient, GitHubContent

from .models import Coordinates

logger = logging.getLogger(__name__)


class DirectoryResolver:
    """Mirror a GitHub folder into a local directory."""

    def __init__(self, client: GitHubClient):
        self.client = client

    def fetch_listing(self, coordinates: Coordinates) -> list[GitHubContent]:
        """Fetch the contents listing for ``coordinates``."""
        return self.client.get_contents(
            coordinates.owner,
            coordinates.repo,
            coordinates.path,
            coordinates.reference,
        )

    def resolve(
        self,
        coordinates: Coordinates,
        local_dir: Path,
        listing: list[GitHubContent] | None = None,
    ) -> int:
        """
        Download the folder at ``coordinates`` into ``local_dir``, recursively.

        Entries are processed sequentially in listing order; the first failure
        aborts the whole call and may leave ``local_dir`` partially written.

        Args:
            coordinates: Remote folder to resolve
            local_dir: Target directory (created if missing)
            listing: Already fetched listing for ``coordinates``, if any

        Returns:
            Number of files written

        Raises:
            RateLimitedError: a listing answered 403
            ListingFailedError: a listing answered another non-success status
            FileDownloadFailedError: a file download failed
        """
        local_dir = Path(local_dir)
        local_dir.mkdir(parents=True, exist_ok=True)

        if listing is None:
            listing = self.fetch_listing(coordinates)

        written = 0
        for item in listing:
            target = local_dir / item.name
            kind = item.kind

            if kind is ContentKind.FILE:
                if not item.download_url:
                    logger.debug("No download_url for %s, skipping", item.name)
                    continue
                target.write_bytes(self.client.download(item))
                written += 1
            elif kind is ContentKind.DIRECTORY:
                logger.debug("Recursing into directory: %s", item.name)
                target.mkdir(parents=True, exist_ok=True)
                written += self.resolve(coordinates.child(item.name), target)
            else:
                logger.debug("Ignoring %s entry: %s", item.type, item.name)

        logger.info(
            "Resolved %s/%s path=%s into %s (%d files)",
            coordinates.owner, coordinates.repo, coordinates.path, local_dir, written,
        )
        return written
