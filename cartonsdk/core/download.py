"""
Network download with progress tracking.

This module streams toolchain archives to disk:
- HTTP/HTTPS downloads with TLS verification
- Response validation (status code and Content-Length)
- Progress reporting (bytes, percentage, speed, ETA)
- Timeout handling

Downloads are blocking. Progress is delivered through a callback that is only
meant for display and never influences the outcome of a download.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import requests
from requests.exceptions import RequestException

from cartonsdk.core.exceptions import DownloadError, InvalidResponseCodeError

logger = logging.getLogger(__name__)

# Progress-bar total used when the server reports a zero Content-Length.
EXPECTED_ARCHIVE_SIZE = 891_856_371

CHUNK_SIZE = 64 * 1024


@dataclass
class DownloadProgress:
    """Progress information for a download."""

    bytes_downloaded: int
    total_bytes: int
    percentage: float
    speed_bps: float  # bytes per second
    eta_seconds: float  # estimated time remaining
    description: str = ""

    def __str__(self) -> str:
        """Format progress for display."""
        return format_progress(self)


ProgressCallback = Callable[[DownloadProgress], None]


def _content_length(response: requests.Response) -> Optional[int]:
    """Parse the Content-Length header, None if absent or not an integer."""
    value = response.headers.get("content-length")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def download_archive(
    url: str,
    destination: Path,
    progress_callback: Optional[ProgressCallback] = None,
    session: Optional[requests.Session] = None,
    timeout: float = 30,
) -> Path:
    """
    Stream a file from URL to destination.

    The response must have status 200 and a Content-Length header, otherwise
    nothing is written to disk.

    Args:
        url: URL to download from
        destination: Local path to save file
        progress_callback: Optional callback for progress updates
        session: Optional requests session (a plain GET is used if None)
        timeout: Request timeout in seconds

    Returns:
        Path to downloaded file

    Raises:
        InvalidResponseCodeError: If the status is not 200 or the
            Content-Length header is missing
        DownloadError: If the request, transfer or archive write fails

    Example:
        >>> def on_progress(progress):
        ...     print(f"Downloaded {progress.percentage:.1f}%")
        >>> download_archive(
        ...     "https://example.com/swift.tar.gz",
        ...     Path("sdk/5.3.tar.gz"),
        ...     progress_callback=on_progress,
        ... )
    """
    if not url:
        raise ValueError("URL cannot be empty")

    destination = Path(destination)
    getter = session.get if session is not None else requests.get

    logger.info(f"Downloading from {url}")

    try:
        response = getter(url, stream=True, timeout=timeout, allow_redirects=True)
    except RequestException as e:
        raise DownloadError(f"Download of {url} failed: {e}") from e

    with response:
        content_length = _content_length(response)
        if response.status_code != 200 or content_length is None:
            logger.error("Download failed")
            raise InvalidResponseCodeError(response.status_code)

        logger.info(f"Archive size is {content_length // 1_000_000} MB")
        total_size = content_length if content_length > 0 else EXPECTED_ARCHIVE_SIZE
        description = f"saving to {destination}"

        downloaded = 0
        start_time = time.time()
        last_progress_time = 0.0
        reported = -1

        try:
            with open(destination, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if not chunk:
                        continue
                    f.write(chunk)
                    downloaded += len(chunk)

                    # Report progress (max once per 0.5 seconds to avoid spam)
                    current_time = time.time()
                    if progress_callback and (
                        current_time - last_progress_time >= 0.5
                        or downloaded >= total_size
                    ):
                        progress_callback(
                            _make_progress(
                                downloaded, total_size, start_time, description
                            )
                        )
                        last_progress_time = current_time
                        reported = downloaded
        except RequestException as e:
            logger.error("Download failed")
            raise DownloadError(f"Download of {url} failed: {e}") from e
        except OSError as e:
            logger.error("Download failed")
            raise DownloadError(f"Failed to write {destination}: {e}") from e

    if progress_callback and reported != downloaded:
        progress_callback(
            _make_progress(downloaded, total_size, start_time, description)
        )

    logger.info("Download completed successfully")
    return destination


def _make_progress(
    downloaded: int, total_size: int, start_time: float, description: str
) -> DownloadProgress:
    elapsed = time.time() - start_time
    speed = downloaded / elapsed if elapsed > 0 else 0
    remaining = max(total_size - downloaded, 0)
    eta = remaining / speed if speed > 0 else 0

    return DownloadProgress(
        bytes_downloaded=downloaded,
        total_bytes=total_size,
        percentage=min(downloaded / total_size * 100, 100.0),
        speed_bps=speed,
        eta_seconds=eta,
        description=description,
    )


def format_progress(progress: DownloadProgress) -> str:
    """
    Format progress for display.

    Args:
        progress: Download progress information

    Returns:
        Formatted progress string

    Example:
        >>> progress = DownloadProgress(52428800, 104857600, 50.0, 1048576, 50)
        >>> print(format_progress(progress))
        50.0/100.0 MB (50.0%) at 1.0 MB/s ETA: 50s
    """
    mb_downloaded = progress.bytes_downloaded / 1024 / 1024
    mb_total = progress.total_bytes / 1024 / 1024
    speed_mbps = progress.speed_bps / 1024 / 1024

    if progress.total_bytes > 0:
        return (
            f"{mb_downloaded:.1f}/{mb_total:.1f} MB "
            f"({progress.percentage:.1f}%) "
            f"at {speed_mbps:.1f} MB/s "
            f"ETA: {progress.eta_seconds:.0f}s"
        )
    else:
        return f"{mb_downloaded:.1f} MB " f"at {speed_mbps:.1f} MB/s"
