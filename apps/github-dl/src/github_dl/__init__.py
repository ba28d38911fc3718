"""Download GitHub folders and keep them in sync."""

from .download import download
from .errors import (
    CorruptMetadataError,
    GitHubDlError,
    MalformedLinkError,
    OutputNotEmptyError,
    UnsupportedShapeError,
    WrongHostError,
)
from .links import parse_link
from .metadata import DESCRIPTOR_FILE, discover_descriptors, read_descriptor, write_descriptor
from .models import Coordinates, Descriptor, RefreshResult
from .refresh import refresh
from .resolver import DirectoryResolver

__all__ = [
    "Coordinates",
    "Descriptor",
    "RefreshResult",
    "DirectoryResolver",
    "DESCRIPTOR_FILE",
    "parse_link",
    "write_descriptor",
    "read_descriptor",
    "discover_descriptors",
    "download",
    "refresh",
    "GitHubDlError",
    "MalformedLinkError",
    "WrongHostError",
    "UnsupportedShapeError",
    "CorruptMetadataError",
    "OutputNotEmptyError",
]
