"""
SDK archive installation.

Downloads a toolchain archive into the SDK directory, unpacks it with tar into a
staging directory, and moves the result to <sdk>/<version> only once tar has
succeeded. The archive and any staging directory are removed afterwards.
"""

import logging
import shutil
from pathlib import Path
from typing import List, Optional

import requests

from cartonsdk.config.parser import DEFAULT_TIMEOUT
from cartonsdk.core.download import ProgressCallback, download_archive
from cartonsdk.core.exceptions import DirectoryMissingError
from cartonsdk.core.process import run_process

logger = logging.getLogger(__name__)


def archive_path_for(sdk_path: Path, version: str) -> Path:
    """Temporary archive location for a version."""
    return sdk_path / f"{version}.tar.gz"


def staging_path_for(sdk_path: Path, version: str) -> Path:
    """Hidden directory an archive is unpacked into before it is moved in place."""
    return sdk_path / f".{version}.partial"


def extract_command(archive_path: Path, destination: Path) -> List[str]:
    """Build the tar invocation that unpacks an archive into destination."""
    return [
        "tar",
        "xzf",
        str(archive_path),
        "--strip-components=1",
        "--directory",
        str(destination),
    ]


def install_sdk(
    version: str,
    url: str,
    sdk_path: Path,
    progress_callback: Optional[ProgressCallback] = None,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    """
    Download and unpack a toolchain archive.

    Args:
        version: Version identifier, used to name the installation directory
        url: Archive download URL
        sdk_path: SDK directory to install into (created if missing)
        progress_callback: Optional callback for download progress
        session: Optional requests session
        timeout: Request timeout in seconds

    Returns:
        Path to the installation directory, <sdk_path>/<version>

    Raises:
        DirectoryMissingError: If sdk_path is not a directory
        InvalidResponseCodeError: If the download response is unusable
        DownloadError: If the transfer fails
        ExternalProcessError: If tar fails
    """
    sdk_path = Path(sdk_path)
    if not sdk_path.exists():
        try:
            sdk_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create {sdk_path}: {e}")

    if not sdk_path.is_dir():
        raise DirectoryMissingError(sdk_path)

    archive_path = archive_path_for(sdk_path, version)
    staging_path = staging_path_for(sdk_path, version)
    installation_path = sdk_path / version

    try:
        logger.info("Downloading the archive")
        download_archive(
            url,
            archive_path,
            progress_callback=progress_callback,
            session=session,
            timeout=timeout,
        )

        if staging_path.exists():
            shutil.rmtree(staging_path)
        staging_path.mkdir()

        command = extract_command(archive_path, staging_path)
        logger.info(f"Unpacking the archive: {' '.join(command)}")
        run_process(command)

        # A leftover directory without a usable toolchain is replaced
        if installation_path.exists():
            shutil.rmtree(installation_path)
        staging_path.rename(installation_path)
    finally:
        if archive_path.exists():
            archive_path.unlink()
            logger.debug(f"Removed archive: {archive_path}")
        if staging_path.exists():
            shutil.rmtree(staging_path, ignore_errors=True)
            logger.debug(f"Removed staging directory: {staging_path}")

    return installation_path
