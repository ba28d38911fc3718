"""GitHub API errors."""

RATE_LIMIT_HINT = (
    "Are you hitting the GitHub API rate limit? "
    "Try setting the GITHUB_TOKEN environment variable."
)


class GitHubError(Exception):
    """Base class for GitHub client errors."""


class RateLimitedError(GitHubError):
    """The API answered 403 (rate limit or forbidden)."""

    status = 403

    def __init__(self, action: str = "list directory"):
        self.action = action
        super().__init__(
            f"Failed to {action}: HTTP 403 Forbidden. {RATE_LIMIT_HINT}"
        )


class ListingFailedError(GitHubError):
    """A contents listing returned an unexpected status."""

    def __init__(self, status: int, endpoint: str = "", reason: str | None = None):
        self.status = status
        self.endpoint = endpoint
        self.reason = reason
        target = f"directory {endpoint}" if endpoint else "directory"
        detail = reason or f"HTTP {status}"
        super().__init__(f"Failed to list {target}: {detail}")


class RemoteFolderNotFoundError(ListingFailedError):
    """The listed folder does not exist on the remote (HTTP 404)."""

    def __init__(self, endpoint: str = ""):
        super().__init__(404, endpoint)


class FileDownloadFailedError(GitHubError):
    """Fetching a file's raw content returned an unexpected status."""

    def __init__(self, name: str, status: int, url: str | None = None):
        self.name = name
        self.status = status
        self.url = url
        super().__init__(f"Failed to download file {name}: HTTP {status}")
