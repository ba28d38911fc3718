"""github-dl data models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Address of a folder inside a GitHub repository."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    reference: str  # branch, tag or commit
    path: str = ""  # empty for repository root

    def child(self, name: str) -> "Coordinates":
        """Coordinates of the sub-folder ``name``."""
        path = f"{self.path}/{name}" if self.path else name
        return self.model_copy(update={"path": path})


class Descriptor(BaseModel):
    """Persisted record of a downloaded folder."""

    owner: str
    repo: str
    reference: str
    path: str
    url: str

    @classmethod
    def from_coordinates(cls, coordinates: Coordinates, url: str) -> "Descriptor":
        return cls(**coordinates.model_dump(), url=url)

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(
            owner=self.owner,
            repo=self.repo,
            reference=self.reference,
            path=self.path,
        )


class RefreshResult(BaseModel):
    """Outcome of a refresh run."""

    discovered: list[Path] = Field(default_factory=list)
    refreshed: list[str] = Field(default_factory=list)  # source links
    skipped: list[str] = Field(default_factory=list)
