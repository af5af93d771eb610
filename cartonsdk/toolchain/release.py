"""
Release asset lookup.

Queries the GitHub releases API of the SwiftWasm project for the release
tagged swift-<version> and picks the asset built for the running platform.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import requests
from requests.exceptions import RequestException

from cartonsdk.config.parser import DEFAULT_RELEASE_API, DEFAULT_TIMEOUT
from cartonsdk.core.exceptions import AssetDecodeError, DownloadError
from cartonsdk.core.platform import platform_suffixes

logger = logging.getLogger(__name__)

RELEASE_TAG_PREFIX = "swift"


@dataclass
class ReleaseAsset:
    """A downloadable file attached to a release."""

    name: str
    url: str


@dataclass
class Release:
    """A tagged release and its assets, in the order the API lists them."""

    assets: List[ReleaseAsset] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: object) -> "Release":
        """
        Build a release from decoded API JSON.

        Raises:
            AssetDecodeError: If the data does not have the expected shape
        """
        if not isinstance(data, dict) or not isinstance(data.get("assets"), list):
            raise AssetDecodeError("Release JSON has no 'assets' list")

        assets = []
        for index, item in enumerate(data["assets"]):
            if not isinstance(item, dict):
                raise AssetDecodeError(f"Release asset #{index} is not an object")
            name = item.get("name")
            url = item.get("browser_download_url")
            if not isinstance(name, str) or not isinstance(url, str):
                raise AssetDecodeError(
                    f"Release asset #{index} lacks 'name' or 'browser_download_url'"
                )
            assets.append(ReleaseAsset(name=name, url=url))

        return cls(assets=assets)


def release_url(version: str, api_base: str = DEFAULT_RELEASE_API) -> str:
    """
    Build the release lookup URL for a version.

    Example:
        >>> release_url("5.3")
        'https://api.github.com/repos/swiftwasm/swift/releases/tags/swift-5.3'
    """
    return f"{api_base.rstrip('/')}/tags/{RELEASE_TAG_PREFIX}-{version}"


def fetch_release(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Optional[Release]:
    """
    Fetch and decode a release.

    Args:
        url: Release lookup URL
        session: Optional requests session
        timeout: Request timeout in seconds

    Returns:
        Decoded release, or None if there is no such release or the
        response has no body

    Raises:
        AssetDecodeError: If the body is not a release JSON document
        DownloadError: If the request fails or answers with an error status
    """
    getter = session.get if session is not None else requests.get

    logger.info(f"Fetching release assets from {url}")
    try:
        response = getter(url, timeout=timeout)
    except RequestException as e:
        raise DownloadError(f"Failed to fetch {url}: {e}") from e

    if response.status_code == 404:
        logger.debug(f"No release found at {url}")
        return None
    if not response.ok:
        raise DownloadError(f"Failed to fetch {url}: HTTP {response.status_code}")

    if not response.content:
        logger.debug(f"Empty response body from {url}")
        return None

    try:
        data = json.loads(response.content)
    except ValueError as e:
        raise AssetDecodeError(f"Failed to decode release JSON from {url}: {e}") from e

    return Release.from_dict(data)


def select_asset_url(release: Release, suffixes: Sequence[str]) -> Optional[str]:
    """
    Pick the first asset whose URL contains one of the platform suffixes.

    Example:
        >>> release = Release([ReleaseAsset("a", "https://x/swift-osx.tar.gz")])
        >>> select_asset_url(release, ("osx", "catalina"))
        'https://x/swift-osx.tar.gz'
    """
    for asset in release.assets:
        if any(suffix in asset.url for suffix in suffixes):
            return asset.url
    return None


def infer_download_url(
    version: str,
    platform_family: Optional[str] = None,
    api_base: str = DEFAULT_RELEASE_API,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Optional[str]:
    """
    Find the download URL of the toolchain archive for a version.

    Args:
        version: Resolved version identifier
        platform_family: 'linux' or 'macos' (auto-detected if None)
        api_base: Base URL of the releases API
        session: Optional requests session
        timeout: Request timeout in seconds

    Returns:
        Asset download URL, or None if no release body or no matching asset

    Raises:
        AssetDecodeError: If the release cannot be decoded
        DownloadError: If the request fails
    """
    release = fetch_release(release_url(version, api_base), session, timeout)
    if release is None:
        return None

    url = select_asset_url(release, platform_suffixes(platform_family))
    if url is None:
        logger.debug(
            f"No asset among {[a.name for a in release.assets]} "
            f"matches platform {platform_family or 'auto'}"
        )
    return url
