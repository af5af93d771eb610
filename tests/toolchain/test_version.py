"""
Unit tests for Swift version resolution.
"""

import logging

import pytest

from cartonsdk.config.parser import DEFAULT_TOOLCHAIN_VERSION
from cartonsdk.toolchain.version import (
    infer_swift_version,
    is_valid_version,
    read_version_file,
    spec_url,
    version_from_archive_name,
)


class TestSpecUrl:
    """Test spec_url function."""

    @pytest.mark.parametrize(
        "hint",
        [
            "https://example.com/swift-5.3-RELEASE-a.tar.gz",
            "http://example.com/toolchain.tar.gz",
        ],
    )
    def test_http_urls(self, hint):
        assert spec_url(hint) == hint

    @pytest.mark.parametrize(
        "hint", [None, "", "5.3", "wasm-5.3.1-RELEASE", "file:///tmp/x.tar.gz"]
    )
    def test_not_urls(self, hint):
        assert spec_url(hint) is None


class TestVersionFromArchiveName:
    """Test version_from_archive_name function."""

    @pytest.mark.parametrize(
        "hint, expected",
        [
            ("https://x/swift-5.3-RELEASE-a.tar.gz", "5.3-RELEASE"),
            (
                "https://github.com/swiftwasm/swift/releases/download/"
                "swift-wasm-5.3-SNAPSHOT-2020-09-24-a/"
                "swift-wasm-5.3-SNAPSHOT-2020-09-24-a-ubuntu18.04_x86_64.tar.gz",
                "wasm-5.3-SNAPSHOT-2020-09-24-a",
            ),
            ("https://x/wasm-5.3.1-RELEASE-macos_x86_64.tar.gz", "wasm-5.3.1-RELEASE"),
        ],
    )
    def test_archive_names(self, hint, expected):
        assert version_from_archive_name(hint) == expected

    @pytest.mark.parametrize(
        "hint", ["5.3", "https://x/toolchain.zip", "https://x/swift.tar.gz"]
    )
    def test_non_archive_names(self, hint):
        assert version_from_archive_name(hint) is None


class TestInferSwiftVersion:
    """Test infer_swift_version function."""

    def test_url_hint(self, project_dir, caplog):
        """Test version is taken from the archive name of a URL hint."""
        with caplog.at_level(logging.INFO):
            version = infer_swift_version(
                "https://x/swift-5.3-RELEASE-a.tar.gz", cwd=project_dir
            )

        assert version == "5.3-RELEASE"
        assert "Inferred swift version: 5.3-RELEASE" in caplog.text

    @pytest.mark.parametrize("hint", ["5.3", "wasm-5.3.1-RELEASE", "https://x/"])
    def test_verbatim_hint(self, project_dir, hint):
        assert infer_swift_version(hint, cwd=project_dir) == hint

    @pytest.mark.parametrize(
        "hint, expected",
        [
            ("https://example.com/download/toolchain.zip", "toolchain"),
            ("https://x/not-an-archive", "not-an-archive"),
            ("https://x/swift.tar.gz", "swift"),
            ("https://x/wasm-5.3.tgz?token=abc", "wasm-5.3"),
        ],
    )
    def test_unrecognised_archive_url(self, project_dir, hint, expected):
        """Test a URL hint never resolves to a string containing the URL."""
        version = infer_swift_version(hint, cwd=project_dir)

        assert version == expected
        assert "/" not in version

    def test_hint_wins_over_version_file(self, project_dir):
        (project_dir / ".swift-version").write_text("wasm-5.3.0-RELEASE\n")
        assert infer_swift_version("5.3", cwd=project_dir) == "5.3"

    def test_default_without_file(self, project_dir):
        assert infer_swift_version(cwd=project_dir) == DEFAULT_TOOLCHAIN_VERSION

    def test_version_file_first_line(self, project_dir):
        (project_dir / ".swift-version").write_text(
            "wasm-5.3.0-RELEASE\nsomething else\n"
        )
        assert infer_swift_version(cwd=project_dir) == "wasm-5.3.0-RELEASE"

    def test_version_file_without_marker(self, project_dir):
        """Test non-SwiftWasm versions in .swift-version are ignored."""
        (project_dir / ".swift-version").write_text("5.3\n")
        assert infer_swift_version(cwd=project_dir) == DEFAULT_TOOLCHAIN_VERSION

    def test_version_file_keeps_leading_whitespace(self, project_dir):
        (project_dir / ".swift-version").write_text(" wasm-5.3.0-RELEASE  \n")
        assert infer_swift_version(cwd=project_dir) == " wasm-5.3.0-RELEASE"

    def test_marker_only_on_second_line(self, project_dir):
        (project_dir / ".swift-version").write_text("5.3\nwasm-5.3.0-RELEASE\n")
        assert infer_swift_version(cwd=project_dir) == DEFAULT_TOOLCHAIN_VERSION

    def test_empty_version_file(self, project_dir):
        (project_dir / ".swift-version").write_text("")
        assert infer_swift_version(cwd=project_dir) == DEFAULT_TOOLCHAIN_VERSION

    def test_version_file_is_directory(self, project_dir):
        (project_dir / ".swift-version").mkdir()
        assert infer_swift_version(cwd=project_dir) == DEFAULT_TOOLCHAIN_VERSION

    def test_custom_default(self, project_dir):
        version = infer_swift_version(cwd=project_dir, default_version="wasm-x")
        assert version == "wasm-x"

    def test_uses_current_directory(self, project_dir, monkeypatch):
        (project_dir / ".swift-version").write_text("wasm-5.3.0-RELEASE")
        monkeypatch.chdir(project_dir)
        assert infer_swift_version() == "wasm-5.3.0-RELEASE"


def test_read_version_file_undecodable(project_dir):
    (project_dir / ".swift-version").write_bytes(b"\xff\xfe\xfa")
    assert read_version_file(project_dir) is None


@pytest.mark.parametrize("version", ["5.3", "wasm-5.3.1-RELEASE", "toolchain"])
def test_valid_versions(version):
    assert is_valid_version(version)


@pytest.mark.parametrize(
    "version", ["", ".", "..", "https://x/", "a/b", "..\\evil", "/abs"]
)
def test_invalid_versions(version):
    assert not is_valid_version(version)
