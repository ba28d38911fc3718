"""GitHub API client."""

import logging
import os
import subprocess
from typing import Any
from urllib.parse import quote

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    before_sleep_log,
)

from .errors import (
    FileDownloadFailedError,
    ListingFailedError,
    RateLimitedError,
    RemoteFolderNotFoundError,
)
from .models import GitHubContent

logger = logging.getLogger(__name__)

# Retry configuration. A single attempt unless the caller opts in.
DEFAULT_MAX_RETRIES = 1
DEFAULT_MIN_WAIT = 1  # seconds
DEFAULT_MAX_WAIT = 10  # seconds
DEFAULT_TIMEOUT = 30.0  # seconds
DEFAULT_USER_AGENT = "github-dl"

# Retryable exceptions (transport only, never HTTP statuses)
RETRYABLE_EXCEPTIONS = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.ReadTimeout,
    httpx.WriteTimeout,
    httpx.PoolTimeout,
    httpx.NetworkError,
)


def get_token_from_gh_cli() -> str | None:
    """
    Get GitHub token from gh cli.

    Returns:
        Token string or None if gh cli not available/authenticated
    """
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        if result.returncode == 0 and result.stdout.strip():
            logger.info("Using token from gh cli")
            return result.stdout.strip()
    except (subprocess.TimeoutExpired, FileNotFoundError) as e:
        logger.debug("gh cli not available: %s", e)
    return None


def get_token(token: str | None = None, use_gh_cli: bool = False) -> str | None:
    """
    Get GitHub token from various sources.

    Priority:
    1. Explicitly provided token
    2. Environment variable GH_TOKEN / GITHUB_TOKEN
    3. gh cli (`gh auth token`) - only if use_gh_cli=True

    Args:
        token: Explicitly provided token
        use_gh_cli: Whether to use gh cli credentials (requires user consent)

    Returns:
        GitHub token or None
    """
    if token:
        logger.debug("Using explicitly provided token")
        return token

    env_token = os.environ.get("GH_TOKEN") or os.environ.get("GITHUB_TOKEN")
    if env_token:
        logger.info("Using token from environment variable")
        return env_token

    if use_gh_cli:
        return get_token_from_gh_cli()

    return None


def create_retry_decorator(max_retries: int = DEFAULT_MAX_RETRIES):
    """Create a retry decorator with specified max attempts."""
    return retry(
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
        stop=stop_after_attempt(max(1, max_retries)),
        wait=wait_exponential(multiplier=1, min=DEFAULT_MIN_WAIT, max=DEFAULT_MAX_WAIT),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def contents_endpoint(owner: str, repo: str, path: str = "") -> str:
    """
    Build the contents API endpoint; an empty path addresses the repository root.

    Every segment is percent-encoded, so names such as ``C#`` or ``a?b``
    stay part of the path.
    """
    endpoint = f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/contents"
    if path:
        segments = "/".join(quote(s, safe="") for s in path.split("/"))
        endpoint = f"{endpoint}/{segments}"
    return endpoint


class GitHubClient:
    """GitHub REST API client for contents listings and raw downloads."""

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        use_gh_cli: bool = False,
        max_retries: int = DEFAULT_MAX_RETRIES,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            token: GitHub personal access token (optional)
            base_url: Custom base URL (defaults to GitHub API)
            timeout: Request timeout in seconds
            use_gh_cli: Use gh cli credentials (requires user consent)
            max_retries: Attempts for transport errors (1 disables retrying)
            transport: Custom httpx transport (mainly for tests)
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": DEFAULT_USER_AGENT,
        }

        resolved_token = get_token(token, use_gh_cli=use_gh_cli)

        if resolved_token:
            self.headers["Authorization"] = f"token {resolved_token}"
            logger.debug("GitHub client initialized with token")
        else:
            logger.warning("GitHub client initialized without token (rate limited)")

        self._http = httpx.Client(
            timeout=timeout,
            headers=self.headers,
            transport=transport,
            follow_redirects=True,
        )
        logger.info("GitHub client ready, base_url=%s, max_retries=%d", self.base_url, max_retries)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request, retrying transport errors only."""

        @create_retry_decorator(self.max_retries)
        def do_request() -> httpx.Response:
            logger.debug("Request: %s %s", method, url)
            response = self._http.request(method, url, **kwargs)
            logger.debug("Response: %s %s (status=%d)", method, url, response.status_code)
            return response

        return do_request()

    def get_contents(
        self, owner: str, repo: str, path: str = "", ref: str | None = None
    ) -> list[GitHubContent]:
        """
        Get repository contents.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path in repository (empty for root)
            ref: Branch/tag/commit (None for the default branch)

        Returns:
            List of GitHubContent items in the order the API returned them

        Raises:
            RateLimitedError: on HTTP 403
            RemoteFolderNotFoundError: on HTTP 404
            ListingFailedError: on any other non-success status
        """
        endpoint = contents_endpoint(owner, repo, path)
        params = {"ref": ref} if ref else {}
        logger.info("Fetching contents: %s/%s path=%s ref=%s", owner, repo, path, ref)
        response = self._request("GET", f"{self.base_url}{endpoint}", params=params)

        if response.status_code == 403:
            raise RateLimitedError("list directory")
        if response.status_code == 404:
            raise RemoteFolderNotFoundError(endpoint)
        if not response.is_success:
            raise ListingFailedError(response.status_code, endpoint)

        try:
            data = response.json()

            # Handle single file response
            if isinstance(data, dict):
                logger.debug("Single file response: %s", data.get("name"))
                return [GitHubContent(**data)]

            logger.debug("Directory listing: %d items", len(data))
            return [GitHubContent(**item) for item in data]
        except (ValueError, TypeError) as e:
            # JSONDecodeError and pydantic ValidationError are ValueErrors
            logger.error("Malformed listing for %s: %s", endpoint, e)
            raise ListingFailedError(
                response.status_code, endpoint, reason=f"malformed response ({e})"
            ) from e

    def download(self, item: GitHubContent) -> bytes:
        """
        Download the raw bytes of a file item through its ``download_url``.

        Raises:
            FileDownloadFailedError: on any non-success status
        """
        if not item.download_url:
            raise ValueError(f"File has no download_url: {item.name}")
        logger.debug("Downloading: %s", item.download_url)
        response = self._request("GET", item.download_url)
        if not response.is_success:
            raise FileDownloadFailedError(item.name, response.status_code, item.download_url)
        logger.debug("Downloaded %s (%d bytes)", item.name, len(response.content))
        return response.content
