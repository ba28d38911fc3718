"""Fresh download of a folder link."""

import logging
from pathlib import Path

from gh import GitHubClient

from .errors import OutputNotEmptyError
from .links import parse_link
from .metadata import write_descriptor
from .models import Descriptor
from .resolver import DirectoryResolver

logger = logging.getLogger(__name__)


def download(client: GitHubClient, link: str, output: Path) -> Path:
    """
    Download the folder behind ``link`` into ``output``.

    The descriptor is written before anything is fetched, so a failed
    download still leaves a folder that ``refresh`` can pick up.

    Raises:
        MalformedLinkError: the link cannot be parsed
        OutputNotEmptyError: ``output`` exists and is not an empty directory
    """
    coordinates = parse_link(link)
    output = Path(output)

    if output.exists():
        if not output.is_dir() or any(output.iterdir()):
            raise OutputNotEmptyError(output)
    output.mkdir(parents=True, exist_ok=True)

    descriptor = Descriptor.from_coordinates(coordinates, url=link)
    write_descriptor(descriptor, output)

    logger.info("Downloading %s into %s", link, output)
    written = DirectoryResolver(client).resolve(coordinates, output)
    logger.info("Downloaded %d files into %s", written, output)
    return output
