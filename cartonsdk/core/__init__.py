"""
Core functionality for cartonsdk.

This package contains the foundational modules that the toolchain pipeline
depends on.
"""

from .directory import (
    get_swiftenv_versions_dir,
    get_carton_sdk_dir,
    installation_roots,
    swift_executable_path,
)

from .platform import (
    PLATFORM_SUFFIXES,
    detect_platform_family,
    platform_suffixes,
    clear_platform_cache,
)

from .download import (
    DownloadProgress,
    download_archive,
    format_progress,
    EXPECTED_ARCHIVE_SIZE,
)

from .process import run_process

from .exceptions import (
    CartonSDKError,
    ToolchainError,
    DirectoryMissingError,
    InvalidInstallationArchiveError,
    InvalidResponseCodeError,
    AssetDecodeError,
    UnresolvedDownloadURLError,
    InvalidVersionError,
    DownloadError,
    ExternalProcessError,
    ConfigError,
)

__all__ = [
    # Directory
    "get_swiftenv_versions_dir",
    "get_carton_sdk_dir",
    "installation_roots",
    "swift_executable_path",
    # Platform
    "PLATFORM_SUFFIXES",
    "detect_platform_family",
    "platform_suffixes",
    "clear_platform_cache",
    # Download
    "DownloadProgress",
    "download_archive",
    "format_progress",
    "EXPECTED_ARCHIVE_SIZE",
    # Process
    "run_process",
    # Exceptions
    "CartonSDKError",
    "ToolchainError",
    "DirectoryMissingError",
    "InvalidInstallationArchiveError",
    "InvalidResponseCodeError",
    "AssetDecodeError",
    "UnresolvedDownloadURLError",
    "InvalidVersionError",
    "DownloadError",
    "ExternalProcessError",
    "ConfigError",
]
