"""Re-synchronize previously downloaded folders."""

import logging
import shutil
from pathlib import Path
from typing import Callable

from gh import GitHubClient, RemoteFolderNotFoundError

from .metadata import DESCRIPTOR_FILE, discover_descriptors, read_descriptor
from .models import RefreshResult
from .resolver import DirectoryResolver

logger = logging.getLogger(__name__)


def clear_folder(folder: Path) -> None:
    """Delete everything inside ``folder`` except its descriptor file."""
    for entry in folder.iterdir():
        if entry.name == DESCRIPTOR_FILE:
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def refresh(
    client: GitHubClient,
    base_dir: Path,
    notify: Callable[[str], None] | None = None,
) -> RefreshResult:
    """
    Refresh every downloaded folder found below ``base_dir``.

    A folder whose remote no longer exists (404) is skipped with a warning.
    Any other failure, a 403 included, aborts the whole run.

    Args:
        client: GitHub client
        base_dir: Directory searched for descriptor files
        notify: Optional callback receiving progress messages

    Returns:
        RefreshResult listing discovered, refreshed and skipped folders
    """
    say = notify or logger.info
    resolver = DirectoryResolver(client)
    result = RefreshResult(discovered=discover_descriptors(base_dir))

    if not result.discovered:
        logger.info("No descriptors under %s", base_dir)
        return result

    for descriptor_path in result.discovered:
        if not descriptor_path.exists():
            # removed while refreshing an enclosing folder earlier in this run
            logger.warning("Descriptor %s disappeared, skipping", descriptor_path)
            continue

        descriptor = read_descriptor(descriptor_path)
        coordinates = descriptor.coordinates
        folder = descriptor_path.parent
        say(f"Refreshing '{descriptor.url}'")

        try:
            listing = resolver.fetch_listing(coordinates)
        except RemoteFolderNotFoundError:
            logger.warning("Remote folder %s does not exist, skipping", descriptor.url)
            result.skipped.append(descriptor.url)
            continue

        clear_folder(folder)
        resolver.resolve(coordinates, folder, listing=listing)
        result.refreshed.append(descriptor.url)
        say(f"Refreshed '{descriptor.url}'")

    return result
