"""
Shared utilities for CLI commands.

Provides config loading and progress output shared by CLI commands.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from cartonsdk.config.parser import CartonConfig, load_config
from cartonsdk.core.download import DownloadProgress

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def load_cli_config(args) -> CartonConfig:
    """
    Load configuration for a command from --config or the default location.

    Raises:
        ConfigError: If the configuration is missing or invalid
    """
    config_path = getattr(args, "config", None)
    return load_config(Path(config_path) if config_path else None)


def resolve_project_root(path: Optional[Path] = None) -> Path:
    """
    Resolve project root directory.

    Args:
        path: Optional path (defaults to current directory)

    Returns:
        Resolved absolute path
    """
    if path is None:
        path = Path.cwd()
    return Path(path).resolve()


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def format_eta(eta_seconds: Optional[float]) -> str:
    """
    Format ETA with h/m/s units.

    Example:
        >>> format_eta(3725)
        '1h 2m 5s'
        >>> format_eta(0)
        '...'
    """
    if not eta_seconds or eta_seconds <= 0:
        return "..."

    eta_secs = int(eta_seconds)
    if eta_secs >= 3600:
        hours = eta_secs // 3600
        minutes = (eta_secs % 3600) // 60
        seconds = eta_secs % 60
        return f"{hours}h {minutes}m {seconds}s"
    elif eta_secs >= 60:
        minutes = eta_secs // 60
        seconds = eta_secs % 60
        return f"{minutes}m {seconds}s"
    else:
        return f"{eta_secs}s"


def format_progress_bar(progress: DownloadProgress, bar_length: int = 40) -> str:
    """
    Render a single progress line for a download.

    Example:
        >>> p = DownloadProgress(50, 100, 50.0, 1048576, 30)
        >>> format_progress_bar(p, bar_length=10)
        '  Downloading: [=====-----] 50.0% | 1.0 MB/s | ETA: 30s'
    """
    filled = int(bar_length * progress.percentage / 100)
    bar = "=" * filled + "-" * (bar_length - filled)
    speed_mbps = progress.speed_bps / (1024 * 1024) if progress.speed_bps else 0

    return (
        f"  Downloading: [{bar}] {progress.percentage:.1f}% | "
        f"{speed_mbps:.1f} MB/s | ETA: {format_eta(progress.eta_seconds)}"
    )


class ProgressBar:
    """Terminal progress bar driven by download progress events."""

    def __init__(self, stream=None, header: str = "Downloading the archive"):
        self.stream = stream or sys.stdout
        self.header = header
        self.started = False
        self.finished = False

    def __call__(self, progress: DownloadProgress):
        if not self.started:
            print(self.header, file=self.stream)
            self.started = True

        print(f"\r{format_progress_bar(progress)}", end="", file=self.stream)
        self.stream.flush()

        if progress.bytes_downloaded >= progress.total_bytes:
            self.finish()

    def finish(self):
        """Terminate the progress line."""
        if self.started and not self.finished:
            print(file=self.stream)  # New line after progress
            self.finished = True
