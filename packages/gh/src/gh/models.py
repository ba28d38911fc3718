"""GitHub API data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ContentKind(str, Enum):
    """Kind of an item in a contents listing."""

    FILE = "file"
    DIRECTORY = "dir"
    OTHER = "other"


class GitHubContent(BaseModel):
    """GitHub content item (file, directory, symlink or submodule)."""

    model_config = ConfigDict(extra="ignore")

    name: str
    type: str
    download_url: str | None = None
    path: str | None = None
    sha: str | None = None
    size: int | None = None
    url: str | None = None
    html_url: str | None = None
    git_url: str | None = None

    @property
    def kind(self) -> ContentKind:
        """Map the raw ``type`` discriminator onto a :class:`ContentKind`."""
        if self.type == ContentKind.FILE.value:
            return ContentKind.FILE
        if self.type == ContentKind.DIRECTORY.value:
            return ContentKind.DIRECTORY
        return ContentKind.OTHER
