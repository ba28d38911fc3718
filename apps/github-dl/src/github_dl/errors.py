"""github-dl errors."""

from pathlib import Path


class GitHubDlError(Exception):
    """Base class for github-dl errors."""


class MalformedLinkError(GitHubDlError):
    """The folder link could not be parsed."""

    def __init__(self, link: str, reason: str = "not a valid absolute URL"):
        self.link = link
        self.reason = reason
        super().__init__(f"Invalid link '{link}': {reason}")


class WrongHostError(MalformedLinkError):
    """The link does not point at github.com."""

    def __init__(self, link: str, host: str):
        self.host = host
        super().__init__(link, f"URL is not a github.com link (host: {host})")


class UnsupportedShapeError(MalformedLinkError):
    """The link path is not owner/repo/tree/ref[/path]."""

    def __init__(self, link: str):
        super().__init__(
            link,
            "URL must be in the format https://github.com/owner/repo/tree/ref[/path]",
        )


class CorruptMetadataError(GitHubDlError):
    """A descriptor file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Corrupt metadata file {path}: {reason}")


class OutputNotEmptyError(GitHubDlError):
    """The download destination already holds content."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Output directory '{path}' is not empty")
