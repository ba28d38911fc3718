"""Folder link parsing."""

import logging
from urllib.parse import unquote, urlsplit

from .errors import MalformedLinkError, UnsupportedShapeError, WrongHostError
from .models import Coordinates

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com"
TREE_MARKER = "tree"


def parse_link(link: str) -> Coordinates:
    """
    Parse a GitHub folder link into coordinates.

    ``https://github.com/<owner>/<repo>/tree/<ref>[/<path>]``

    Args:
        link: Browsable folder link

    Returns:
        Coordinates of the folder (path is empty for the repository root)

    Raises:
        MalformedLinkError: the input is not an absolute URL
        WrongHostError: the host is not github.com
        UnsupportedShapeError: the path is not owner/repo/tree/ref[/path]
    """
    try:
        parts = urlsplit(link.strip())
        host = parts.hostname
    except ValueError as e:
        raise MalformedLinkError(link, str(e)) from e

    if not parts.scheme or not host:
        raise MalformedLinkError(link)
    if host != GITHUB_HOST:
        raise WrongHostError(link, host)

    segments = [unquote(s) for s in parts.path.split("/") if s]
    if len(segments) < 4 or segments[2] != TREE_MARKER:
        raise UnsupportedShapeError(link)

    coordinates = Coordinates(
        owner=segments[0],
        repo=segments[1],
        reference=segments[3],
        path="/".join(segments[4:]),
    )
    logger.debug("Parsed link %s -> %s", link, coordinates)
    return coordinates
