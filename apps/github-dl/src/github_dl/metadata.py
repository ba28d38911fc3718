"""Descriptor files marking downloaded folders."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .errors import CorruptMetadataError
from .models import Descriptor

logger = logging.getLogger(__name__)

DESCRIPTOR_FILE = ".github-dl.json"


def write_descriptor(descriptor: Descriptor, directory: Path) -> Path:
    """Save descriptor into ``directory``, returning the file path."""
    path = Path(directory) / DESCRIPTOR_FILE
    with path.open("w", encoding="utf-8") as f:
        json.dump(descriptor.model_dump(mode="json"), f, ensure_ascii=False, indent=2)
    logger.debug("Wrote descriptor %s", path)
    return path


def read_descriptor(path: Path) -> Descriptor:
    """Load descriptor from a descriptor file path."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CorruptMetadataError(path, str(e)) from e
    if not isinstance(data, dict):
        raise CorruptMetadataError(path, "expected a JSON object")
    try:
        return Descriptor(**data)
    except ValidationError as e:
        raise CorruptMetadataError(path, str(e)) from e


def _reraise(error: OSError) -> None:
    raise error


def discover_descriptors(root: Path) -> list[Path]:
    """
    Find every descriptor file below ``root``, at any depth.

    Symlinked directories are not followed. A missing or unreadable
    directory raises the underlying ``OSError``.
    """
    found: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_reraise):
        if DESCRIPTOR_FILE in filenames:
            candidate = Path(dirpath) / DESCRIPTOR_FILE
            if candidate.is_file():
                found.append(candidate)
    found.sort()
    logger.debug("Discovered %d descriptor(s) under %s", len(found), root)
    return found
