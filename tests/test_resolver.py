"""Tests for the directory resolver."""

import pytest

from conftest import RAW, dir_entry, file_entry
from gh import FileDownloadFailedError, ListingFailedError, RateLimitedError
from github_dl.models import Coordinates
from github_dl.resolver import DirectoryResolver


def coords(path: str = "") -> Coordinates:
    return Coordinates(owner="acme", repo="widgets", reference="main", path=path)


class TestResolve:
    """Test DirectoryResolver.resolve."""

    def test_file_and_directory(self, tmp_path, client, fake_github):
        fake_github.add_listing("src", [file_entry("a.txt", f"{RAW}/a"), dir_entry("sub")])
        fake_github.add_listing("src/sub", [file_entry("b.bin", f"{RAW}/b")])
        fake_github.add_file(f"{RAW}/a", b"alpha\n")
        fake_github.add_file(f"{RAW}/b", b"\x00\xffbeta")

        written = DirectoryResolver(client).resolve(coords("src"), tmp_path / "out")

        assert written == 2
        assert (tmp_path / "out" / "a.txt").read_bytes() == b"alpha\n"
        assert (tmp_path / "out" / "sub" / "b.bin").read_bytes() == b"\x00\xffbeta"
        listed = [r.url.path for r in fake_github.listing_requests()]
        assert listed == ["/repos/acme/widgets/contents/src", "/repos/acme/widgets/contents/src/sub"]

    def test_child_path_from_root(self, tmp_path, client, fake_github):
        fake_github.add_listing("", [dir_entry("docs")])
        fake_github.add_listing("docs", [])

        DirectoryResolver(client).resolve(coords(), tmp_path)

        assert (tmp_path / "docs").is_dir()
        listed = [r.url.path for r in fake_github.listing_requests()]
        assert listed == ["/repos/acme/widgets/contents", "/repos/acme/widgets/contents/docs"]

    def test_names_with_url_delimiters(self, tmp_path, client, fake_github):
        fake_github.add_listing("", [dir_entry("C#"), dir_entry("what?")])
        fake_github.add_listing("C#", [file_entry("Program.cs", f"{RAW}/program")])
        fake_github.add_listing("what?", [])
        fake_github.add_file(f"{RAW}/program", b"class Program {}")

        written = DirectoryResolver(client).resolve(coords(), tmp_path)

        assert written == 1
        assert (tmp_path / "C#" / "Program.cs").read_bytes() == b"class Program {}"
        assert (tmp_path / "what?").is_dir()
        listed = [r.url.path for r in fake_github.listing_requests()]
        assert listed == [
            "/repos/acme/widgets/contents",
            "/repos/acme/widgets/contents/C#",
            "/repos/acme/widgets/contents/what?",
        ]

    def test_deep_tree(self, tmp_path, client, fake_github):
        fake_github.add_listing("", [dir_entry("a")])
        fake_github.add_listing("a", [dir_entry("b")])
        fake_github.add_listing("a/b", [dir_entry("c")])
        fake_github.add_listing("a/b/c", [file_entry("leaf.txt", f"{RAW}/leaf")])
        fake_github.add_file(f"{RAW}/leaf", b"leaf")

        DirectoryResolver(client).resolve(coords(), tmp_path)

        assert (tmp_path / "a" / "b" / "c" / "leaf.txt").read_text() == "leaf"

    def test_creates_missing_target(self, tmp_path, client, fake_github):
        fake_github.add_listing("", [])
        target = tmp_path / "x" / "y" / "z"

        DirectoryResolver(client).resolve(coords(), target)

        assert target.is_dir()

    def test_overwrites_existing_file(self, tmp_path, client, fake_github):
        fake_github.add_listing("", [file_entry("a.txt", f"{RAW}/a")])
        fake_github.add_file(f"{RAW}/a", b"new")
        (tmp_path / "a.txt").write_bytes(b"old contents")

        DirectoryResolver(client).resolve(coords(), tmp_path)

        assert (tmp_path / "a.txt").read_bytes() == b"new"

    def test_other_kinds_ignored(self, tmp_path, client, fake_github):
        fake_github.add_listing(
            "",
            [
                {"name": "vendor", "type": "submodule", "download_url": None},
                {"name": "link", "type": "symlink", "download_url": f"{RAW}/link"},
                file_entry("no-url.txt", None),
            ],
        )

        written = DirectoryResolver(client).resolve(coords(), tmp_path)

        assert written == 0
        assert list(tmp_path.iterdir()) == []
        assert len(fake_github.requests) == 1

    def test_prefetched_listing(self, tmp_path, client, fake_github):
        resolver = DirectoryResolver(client)
        fake_github.add_listing("", [file_entry("a.txt", f"{RAW}/a")])
        fake_github.add_file(f"{RAW}/a", b"a")
        listing = resolver.fetch_listing(coords())

        resolver.resolve(coords(), tmp_path, listing=listing)

        assert len(fake_github.listing_requests()) == 1
        assert (tmp_path / "a.txt").exists()


class TestResolveErrors:
    """Test failure propagation."""

    def test_rate_limited(self, tmp_path, client, fake_github):
        fake_github.add_listing("", status=403)

        with pytest.raises(RateLimitedError):
            DirectoryResolver(client).resolve(coords(), tmp_path)

    def test_listing_failed(self, tmp_path, client, fake_github):
        fake_github.add_listing("", status=502)

        with pytest.raises(ListingFailedError) as excinfo:
            DirectoryResolver(client).resolve(coords(), tmp_path)

        assert excinfo.value.status == 502

    def test_nested_failure_aborts(self, tmp_path, client, fake_github):
        fake_github.add_listing("", [dir_entry("sub"), file_entry("after.txt", f"{RAW}/after")])
        fake_github.add_listing("sub", status=500)
        fake_github.add_file(f"{RAW}/after", b"after")

        with pytest.raises(ListingFailedError):
            DirectoryResolver(client).resolve(coords(), tmp_path)

        # Entries after the failing one are not processed
        assert not (tmp_path / "after.txt").exists()

    def test_file_download_failed(self, tmp_path, client, fake_github):
        fake_github.add_listing("", [file_entry("a.txt", f"{RAW}/a"), file_entry("b.txt", f"{RAW}/b")])
        fake_github.add_file(f"{RAW}/a", b"", status=403)
        fake_github.add_file(f"{RAW}/b", b"b")

        with pytest.raises(FileDownloadFailedError) as excinfo:
            DirectoryResolver(client).resolve(coords(), tmp_path)

        assert excinfo.value.name == "a.txt"
        assert excinfo.value.status == 403
        assert not (tmp_path / "a.txt").exists()
        assert not (tmp_path / "b.txt").exists()
