"""Тесты разбора URL файла на GitHub"""

import pytest

from github_watch.application import parse_file_url
from github_watch.domain import FileReference, InvalidReferenceError
from github_watch.domain.errors import INVALID_URL_MESSAGE


class TestParseFileUrl:
    """Разбор https://github.com/owner/repo/blob/ref/path"""

    def test_simple_file(self):
        ref = parse_file_url("https://github.com/gr2m/sandbox/blob/main/test-file")

        assert ref.owner == "gr2m"
        assert ref.repository == "sandbox"
        assert ref.revision == "main"
        assert ref.path == "test-file"

    def test_nested_path_keeps_slashes(self):
        ref = parse_file_url("https://github.com/owner/repo/blob/main/path/to/file.txt")

        assert ref.path == "path/to/file.txt"

    def test_other_branch(self):
        ref = parse_file_url("https://github.com/owner/repo/blob/develop/file.js")

        assert ref.revision == "develop"
        assert ref.path == "file.js"

    def test_commit_sha_revision(self):
        sha = "3f2a9c1d0b8e7f6a5c4d3e2f1a0b9c8d7e6f5a4b"
        ref = parse_file_url(f"https://github.com/owner/repo/blob/{sha}/docs/index.md")

        assert ref.revision == sha
        assert ref.path == "docs/index.md"

    def test_end_to_end_reference(self):
        ref = parse_file_url("https://github.com/acme/widgets/blob/main/src/file.txt")

        assert ref == FileReference(
            owner="acme",
            repository="widgets",
            revision="main",
            path="src/file.txt",
        )

    def test_url_without_scheme(self):
        ref = parse_file_url("github.com/acme/widgets/blob/main/README.md")

        assert ref.slug == "acme/widgets"

    def test_custom_host(self):
        ref = parse_file_url(
            "https://git.example.com/acme/widgets/blob/main/a/b.txt",
            host="git.example.com",
        )

        assert ref.path == "a/b.txt"

    def test_host_is_literal_not_regex(self):
        with pytest.raises(InvalidReferenceError):
            parse_file_url("https://githubxcom/acme/widgets/blob/main/a.txt")

    @pytest.mark.parametrize("url", [
        "https://example.com/invalid/url",
        "https://github.com/owner/repo",
        "https://github.com/owner/repo/tree/main/src",
        "https://github.com/owner/repo/blob/main",
        "https://github.com/owner/repo/blob/main/",
        "https://gitlab.com/owner/repo/blob/main/file.txt",
        "",
    ])
    def test_invalid_urls(self, url):
        with pytest.raises(InvalidReferenceError) as exc_info:
            parse_file_url(url)

        assert str(exc_info.value) == INVALID_URL_MESSAGE

    def test_error_message_is_stable(self):
        assert INVALID_URL_MESSAGE == (
            "Invalid GitHub URL. Expected format: "
            "https://github.com/owner/repo/blob/branch/path/to/file"
        )


class TestFileReference:
    """Value object FileReference"""

    def test_is_frozen(self, target):
        with pytest.raises(Exception):
            target.owner = "other"

    def test_empty_fields_rejected(self):
        with pytest.raises(Exception):
            FileReference(owner="", repository="r", revision="main", path="f")

    def test_display(self, target):
        assert target.display() == "acme/widgets/src/file.txt (ref: main)"
