"""
Toolchain resolution and installation.

This module ties the pipeline together: resolve the version, look for a local
installation in each root, and otherwise download and unpack the SDK.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import requests

from cartonsdk.config.parser import CartonConfig
from cartonsdk.core.directory import installation_roots
from cartonsdk.core.download import ProgressCallback
from cartonsdk.core.exceptions import (
    InvalidInstallationArchiveError,
    InvalidVersionError,
    UnresolvedDownloadURLError,
)
from cartonsdk.toolchain.installer import install_sdk
from cartonsdk.toolchain.probe import check_and_log
from cartonsdk.toolchain.release import infer_download_url
from cartonsdk.toolchain.version import (
    infer_swift_version,
    is_valid_version,
    spec_url,
)

logger = logging.getLogger(__name__)


class ToolchainManager:
    """
    Locates Swift toolchains and installs missing ones.

    Installation roots are searched in order: swiftenv versions first, then the
    SDK directory. Only the SDK directory is ever written to.

    Example:
        >>> manager = ToolchainManager()
        >>> swift_path, version = manager.infer_swift_path("wasm-5.3.1-RELEASE")
        >>> print(f"Using {swift_path} ({version})")
    """

    def __init__(
        self,
        home: Optional[Path] = None,
        config: Optional[CartonConfig] = None,
        session: Optional[requests.Session] = None,
        progress_callback: Optional[ProgressCallback] = None,
        platform_family: Optional[str] = None,
        cwd: Optional[Path] = None,
    ):
        """
        Initialize toolchain manager.

        Args:
            home: Home directory holding .swiftenv and .carton
            config: Configuration (defaults if None)
            session: Optional requests session for all network calls
            progress_callback: Optional callback for download progress
            platform_family: 'linux' or 'macos' (auto-detected if None)
            cwd: Project directory holding .swift-version
        """
        self.config = config or CartonConfig()
        self.roots = installation_roots(
            home,
            swiftenv_dir=self.config.swiftenv_dir,
            sdk_dir=self.config.sdk_dir,
        )
        self.session = session
        self.progress_callback = progress_callback
        self.platform_family = platform_family
        self.cwd = cwd

    @property
    def swiftenv_versions_path(self) -> Path:
        return self.roots[0]

    @property
    def sdk_path(self) -> Path:
        return self.roots[-1]

    def infer_swift_version(self, version_spec: Optional[str] = None) -> str:
        """Resolve a version hint with this manager's defaults."""
        return infer_swift_version(
            version_spec, cwd=self.cwd, default_version=self.config.default_version
        )

    def find_installed(self, swift_version: str) -> Optional[Path]:
        """
        Find an installed swift executable for a version.

        Returns:
            Path from the first root that has it, or None
        """
        for root in self.roots:
            path = check_and_log(swift_version, root, timeout=self.config.timeout)
            if path:
                return path
        return None

    def infer_swift_path(
        self, version_spec: Optional[str] = None
    ) -> Tuple[Path, str]:
        """
        Find the swift executable for a version hint, installing it if needed.

        Args:
            version_spec: Version string, archive URL, or None to use the
                project's .swift-version file or the default version

        Returns:
            Tuple of (swift executable path, resolved version)

        Raises:
            UnresolvedDownloadURLError: If nothing to download can be found
            InvalidVersionError: If the version cannot name a directory
            InvalidInstallationArchiveError: If the unpacked archive has no
                swift executable
            InvalidResponseCodeError: If the archive download is rejected
            AssetDecodeError: If the release lookup cannot be decoded
            DownloadError: If a network request fails
            ExternalProcessError: If tar or swift fails
        """
        direct_url = spec_url(version_spec)
        swift_version = self.infer_swift_version(version_spec)
        if not is_valid_version(swift_version):
            raise InvalidVersionError(swift_version)

        path = self.find_installed(swift_version)
        if path:
            return path, swift_version

        if direct_url:
            download_url = direct_url
        else:
            download_url = infer_download_url(
                swift_version,
                platform_family=self.platform_family,
                api_base=self.config.release_api,
                session=self.session,
                timeout=self.config.timeout,
            )
        if not download_url:
            raise UnresolvedDownloadURLError(swift_version)

        logger.warning(
            f"Local installation of Swift version {swift_version} not found"
        )
        logger.info(f"Swift toolchain/SDK download URL: {download_url}")

        installation_path = install_sdk(
            swift_version,
            download_url,
            self.sdk_path,
            progress_callback=self.progress_callback,
            session=self.session,
            timeout=self.config.timeout,
        )

        path = check_and_log(
            swift_version, self.sdk_path, timeout=self.config.timeout
        )
        if not path:
            raise InvalidInstallationArchiveError(installation_path)

        return path, swift_version

    def fetch_all_swift_versions(self) -> List[str]:
        """
        List versions present in any installation root.

        Returns:
            Sorted union of the entry names of all existing roots
        """
        result = set()
        for root in self.roots:
            if root.is_dir():
                result.update(child.name for child in root.iterdir())
        return sorted(result)


# Convenience functions for one-off calls
def infer_swift_path(
    version_spec: Optional[str] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> Tuple[Path, str]:
    """
    Convenience function to resolve (and install if needed) a toolchain.

    Example:
        >>> from cartonsdk.toolchain.manager import infer_swift_path
        >>> swift_path, version = infer_swift_path()
    """
    manager = ToolchainManager(progress_callback=progress_callback)
    return manager.infer_swift_path(version_spec)


def fetch_all_swift_versions() -> List[str]:
    """Convenience function to list installed versions."""
    return ToolchainManager().fetch_all_swift_versions()
