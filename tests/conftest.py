"""Shared fixtures: an in-memory GitHub served through httpx.MockTransport."""

import httpx
import pytest

from gh import GitHubClient

RAW = "https://raw.githubusercontent.com"


def file_entry(name: str, download_url: str | None) -> dict:
    return {"name": name, "type": "file", "download_url": download_url}


def dir_entry(name: str) -> dict:
    return {"name": name, "type": "dir", "download_url": None}


class FakeGitHub:
    """Answers contents listings and raw downloads from dictionaries."""

    def __init__(self):
        self.listings: dict[tuple[str, str | None], tuple[int, object]] = {}
        self.files: dict[str, tuple[int, bytes]] = {}
        self.requests: list[httpx.Request] = []

    def add_listing(
        self,
        path: str,
        entries: object = (),
        ref: str | None = "main",
        owner: str = "acme",
        repo: str = "widgets",
        status: int = 200,
    ) -> None:
        endpoint = f"/repos/{owner}/{repo}/contents"
        if path:
            endpoint = f"{endpoint}/{path}"
        payload = list(entries) if isinstance(entries, (list, tuple)) else entries
        self.listings[(endpoint, ref)] = (status, payload)

    def add_file(self, url: str, content: bytes, status: int = 200) -> None:
        self.files[url] = (status, content)

    def listing_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == "api.github.com"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "api.github.com":
            key = (request.url.path, request.url.params.get("ref"))
            if key not in self.listings:
                return httpx.Response(404, json={"message": "Not Found"})
            status, payload = self.listings[key]
            if status != 200:
                return httpx.Response(status, json={"message": "error"})
            return httpx.Response(200, json=payload)

        url = str(request.url)
        if url not in self.files:
            return httpx.Response(404, text="404: Not Found")
        status, content = self.files[url]
        return httpx.Response(status, content=content)


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def client(fake_github):
    with GitHubClient(token="test-token", transport=httpx.MockTransport(fake_github.handler)) as c:
        yield c
