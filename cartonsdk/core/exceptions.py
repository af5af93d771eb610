"""
Centralized exception hierarchy for cartonsdk.

Every error raised by the resolution and installation pipeline derives from
CartonSDKError so the CLI can report it uniformly.
"""

from pathlib import Path
from typing import Optional, Sequence


# ============================================================================
# Base Exceptions
# ============================================================================


class CartonSDKError(Exception):
    """Base exception for all cartonsdk errors."""

    pass


# ============================================================================
# Toolchain-related Exceptions
# ============================================================================


class ToolchainError(CartonSDKError):
    """Base exception for toolchain resolution and installation errors."""

    pass


class DirectoryMissingError(ToolchainError):
    """Raised when the SDK directory cannot be created or is not a directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Directory does not exist or is not a directory: {path}")


class InvalidInstallationArchiveError(ToolchainError):
    """Raised when an unpacked archive does not contain the swift executable."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"Invalid installation archive, swift executable not found in: {path}"
        )


class InvalidResponseCodeError(ToolchainError):
    """Raised when an archive download answers with an unusable response."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Invalid response code: {status_code}")


class AssetDecodeError(ToolchainError):
    """Raised when a release API response cannot be decoded."""

    pass


class UnresolvedDownloadURLError(ToolchainError):
    """Raised when no download URL can be found for a version."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Failed to infer download URL for version {version}")


class InvalidVersionError(ToolchainError):
    """Raised when a resolved version cannot name an installation directory."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Invalid Swift version for an installation: {version!r}")


class DownloadError(ToolchainError):
    """Raised when a network request fails before a response is usable."""

    pass


# ============================================================================
# Process Exceptions
# ============================================================================


class ExternalProcessError(CartonSDKError):
    """Raised when an external process cannot be started or exits non-zero."""

    def __init__(
        self,
        args: Sequence[str],
        returncode: Optional[int] = None,
        output: str = "",
    ):
        self.command = list(args)
        self.returncode = returncode
        self.output = output
        command = " ".join(self.command)
        if returncode is None:
            msg = f"Failed to run process: {command}"
        else:
            msg = f"Process exited with code {returncode}: {command}"
        if output:
            msg += f"\n{output.strip()}"
        super().__init__(msg)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(CartonSDKError):
    """Configuration parsing or validation error."""

    pass
