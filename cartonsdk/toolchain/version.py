"""
Swift version resolution.

A version hint can be an explicit version ("wasm-5.3.1-RELEASE"), the URL of a
toolchain archive, or absent. Without a hint the project's .swift-version file
is consulted, and the default toolchain version is the final fallback.
"""

import logging
import re
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import urlparse

from cartonsdk.config.parser import DEFAULT_TOOLCHAIN_VERSION

logger = logging.getLogger(__name__)

VERSION_FILE = ".swift-version"

# Only SwiftWasm versions are picked up from .swift-version
VERSION_MARKER = "wasm"

# swift-wasm-5.3-SNAPSHOT-2020-09-24-a-ubuntu18.04_x86_64.tar.gz
#       `---------- version ---------' `-- platform --'
ARCHIVE_NAME_PATTERN = re.compile(r"^(?:swift-)?(.+)-[^-]+\.tar\.gz$")

ARCHIVE_SUFFIX_PATTERN = re.compile(r"\.(?:tar\.(?:gz|xz|bz2)|tgz|tar|zip)$")


def spec_url(version_spec: Optional[str]) -> Optional[str]:
    """
    Return the hint itself if it is an HTTP(S) URL.

    Example:
        >>> spec_url("https://example.com/swift-5.3-RELEASE-a.tar.gz")
        'https://example.com/swift-5.3-RELEASE-a.tar.gz'
        >>> spec_url("5.3") is None
        True
    """
    if not version_spec:
        return None

    parsed = urlparse(version_spec)
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return version_spec
    return None


def version_from_archive_name(version_spec: str) -> Optional[str]:
    """
    Extract a version from the archive file name at the end of a URL or path.

    Returns:
        The version, or None if the name is not a toolchain archive name
    """
    filename = PurePosixPath(urlparse(version_spec).path).name
    match = ARCHIVE_NAME_PATTERN.match(filename)
    return match.group(1) if match else None


def archive_stem(version_spec: str) -> str:
    """
    File name at the end of a URL with any archive extension removed.

    Example:
        >>> archive_stem("https://example.com/download/toolchain.zip")
        'toolchain'
    """
    filename = PurePosixPath(urlparse(version_spec).path).name
    return ARCHIVE_SUFFIX_PATTERN.sub("", filename)


def is_valid_version(version: str) -> bool:
    """Check that a version can be used as a single directory name."""
    if not version or version in (".", ".."):
        return False
    return "/" not in version and "\\" not in version


def read_version_file(cwd: Optional[Path] = None) -> Optional[str]:
    """
    Read the first line of the project's .swift-version file.

    Args:
        cwd: Project directory (defaults to the current directory)

    Returns:
        First line of the file, or None if there is no readable file
    """
    version_file = Path(cwd or Path.cwd()) / VERSION_FILE
    if not version_file.is_file():
        return None

    try:
        content = version_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read {version_file}: {e}")
        return None

    lines = content.splitlines()
    return lines[0].rstrip() if lines else ""


def infer_swift_version(
    version_spec: Optional[str] = None,
    cwd: Optional[Path] = None,
    default_version: str = DEFAULT_TOOLCHAIN_VERSION,
) -> str:
    """
    Infer the Swift version to use.

    Args:
        version_spec: Version string, archive URL, or None
        cwd: Project directory holding .swift-version
        default_version: Version used when nothing else applies

    Returns:
        Non-empty version identifier

    Example:
        >>> infer_swift_version("https://x/swift-5.3-RELEASE-a.tar.gz")
        '5.3-RELEASE'
        >>> infer_swift_version("wasm-5.3.0-RELEASE")
        'wasm-5.3.0-RELEASE'
    """
    if version_spec:
        version = version_from_archive_name(version_spec)
        if version:
            logger.info(f"Inferred swift version: {version}")
            return version
        if spec_url(version_spec):
            # Unrecognised archive names still install under their own name
            version = archive_stem(version_spec)
            if version:
                logger.info(f"Inferred swift version: {version}")
                return version
        return version_spec

    version = read_version_file(cwd)
    if not version or VERSION_MARKER not in version:
        return default_version

    return version
