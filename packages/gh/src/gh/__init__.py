"""GitHub API client utilities."""

from .client import GitHubClient, contents_endpoint, get_token
from .errors import (
    FileDownloadFailedError,
    GitHubError,
    ListingFailedError,
    RateLimitedError,
    RemoteFolderNotFoundError,
)
from .models import ContentKind, GitHubContent

__all__ = [
    "GitHubClient",
    "GitHubContent",
    "ContentKind",
    "GitHubError",
    "RateLimitedError",
    "ListingFailedError",
    "RemoteFolderNotFoundError",
    "FileDownloadFailedError",
    "contents_endpoint",
    "get_token",
]
