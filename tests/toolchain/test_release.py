"""
Unit tests for release asset lookup.
"""

import pytest
import requests
import responses

from cartonsdk.core.exceptions import AssetDecodeError, DownloadError
from cartonsdk.toolchain.release import (
    Release,
    ReleaseAsset,
    fetch_release,
    infer_download_url,
    release_url,
    select_asset_url,
)

API = "https://api.github.com/repos/swiftwasm/swift/releases"
LINUX_URL = (
    "https://github.com/swiftwasm/swift/releases/download/swift-5.3/"
    "swift-5.3-ubuntu18.04_x86_64.tar.gz"
)
MACOS_URL = (
    "https://github.com/swiftwasm/swift/releases/download/swift-5.3/"
    "swift-5.3-macos_x86_64-osx.tar.gz"
)


def release_json(*urls):
    return {
        "tag_name": "swift-5.3",
        "assets": [
            {"name": url.rsplit("/", 1)[-1], "browser_download_url": url}
            for url in urls
        ],
    }


class TestReleaseUrl:
    """Test release_url function."""

    def test_default_api(self):
        assert release_url("5.3") == f"{API}/tags/swift-5.3"

    def test_custom_api(self):
        url = release_url("wasm-5.3.1-RELEASE", "https://mirror.example.com/api/")
        assert url == "https://mirror.example.com/api/tags/swift-wasm-5.3.1-RELEASE"


class TestRelease:
    """Test Release decoding."""

    def test_from_dict(self):
        release = Release.from_dict(release_json(LINUX_URL, MACOS_URL))

        assert release.assets == [
            ReleaseAsset(name="swift-5.3-ubuntu18.04_x86_64.tar.gz", url=LINUX_URL),
            ReleaseAsset(name="swift-5.3-macos_x86_64-osx.tar.gz", url=MACOS_URL),
        ]

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"message": "Not Found"},
            {"assets": "nope"},
            {"assets": ["nope"]},
            {"assets": [{"name": "a"}]},
            {"assets": [{"name": 1, "browser_download_url": "https://x"}]},
        ],
    )
    def test_invalid_shapes(self, data):
        with pytest.raises(AssetDecodeError):
            Release.from_dict(data)


class TestSelectAssetUrl:
    """Test select_asset_url function."""

    def test_first_match_in_list_order(self):
        release = Release.from_dict(
            release_json(MACOS_URL, LINUX_URL, "https://x/swift-linux.tar.gz")
        )
        assert select_asset_url(release, ("linux", "ubuntu18.04")) == LINUX_URL

    def test_macos(self):
        release = Release.from_dict(release_json(LINUX_URL, MACOS_URL))
        assert select_asset_url(release, ("osx", "catalina")) == MACOS_URL

    def test_no_match(self):
        release = Release.from_dict(release_json(LINUX_URL))
        assert select_asset_url(release, ("osx", "catalina")) is None

    def test_no_assets(self):
        assert select_asset_url(Release(), ("linux",)) is None


class TestFetchRelease:
    """Test fetch_release function."""

    @responses.activate
    def test_decodes_release(self):
        responses.add(
            responses.GET, f"{API}/tags/swift-5.3", json=release_json(LINUX_URL)
        )

        release = fetch_release(f"{API}/tags/swift-5.3")

        assert release.assets[0].url == LINUX_URL

    @responses.activate
    def test_empty_body(self):
        responses.add(responses.GET, f"{API}/tags/swift-5.3", body=b"", status=200)
        assert fetch_release(f"{API}/tags/swift-5.3") is None

    @responses.activate
    def test_not_found(self):
        responses.add(
            responses.GET,
            f"{API}/tags/swift-0.0",
            json={"message": "Not Found"},
            status=404,
        )
        assert fetch_release(f"{API}/tags/swift-0.0") is None

    @responses.activate
    def test_server_error(self):
        responses.add(responses.GET, f"{API}/tags/swift-5.3", status=503)
        with pytest.raises(DownloadError, match="HTTP 503"):
            fetch_release(f"{API}/tags/swift-5.3")

    @responses.activate
    def test_malformed_json(self):
        """Test malformed JSON is a recoverable AssetDecodeError."""
        responses.add(
            responses.GET, f"{API}/tags/swift-5.3", body=b"{not json", status=200
        )
        with pytest.raises(AssetDecodeError, match="Failed to decode"):
            fetch_release(f"{API}/tags/swift-5.3")

    @responses.activate
    def test_connection_error(self):
        responses.add(
            responses.GET,
            f"{API}/tags/swift-5.3",
            body=requests.exceptions.ConnectionError("unreachable"),
        )
        with pytest.raises(DownloadError, match="unreachable"):
            fetch_release(f"{API}/tags/swift-5.3")


class TestInferDownloadUrl:
    """Test infer_download_url function."""

    @responses.activate
    def test_linux(self):
        responses.add(
            responses.GET,
            f"{API}/tags/swift-5.3",
            json=release_json(MACOS_URL, LINUX_URL),
        )
        assert infer_download_url("5.3", platform_family="linux") == LINUX_URL

    @responses.activate
    def test_macos(self):
        responses.add(
            responses.GET,
            f"{API}/tags/swift-5.3",
            json=release_json(LINUX_URL, MACOS_URL),
        )
        assert infer_download_url("5.3", platform_family="macos") == MACOS_URL

    @responses.activate
    def test_no_matching_asset(self):
        responses.add(
            responses.GET, f"{API}/tags/swift-5.3", json=release_json(LINUX_URL)
        )
        assert infer_download_url("5.3", platform_family="macos") is None

    @responses.activate
    def test_empty_body(self):
        responses.add(responses.GET, f"{API}/tags/swift-5.3", body=b"")
        assert infer_download_url("5.3", platform_family="linux") is None
