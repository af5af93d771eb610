"""
Local toolchain lookup.

Checks whether an installation root holds the swift executable for a version.
"""

import logging
from pathlib import Path
from typing import Optional

from cartonsdk.config.parser import DEFAULT_TIMEOUT
from cartonsdk.core.directory import swift_executable_path
from cartonsdk.core.process import run_process

logger = logging.getLogger(__name__)


def check_and_log(
    swift_version: str, prefix: Path, timeout: float = DEFAULT_TIMEOUT
) -> Optional[Path]:
    """
    Look for the swift executable of a version under an installation root.

    When found, the executable's own version banner is logged.

    Args:
        swift_version: Resolved version identifier
        prefix: Installation root
        timeout: Seconds to wait for the version query

    Returns:
        Path to the swift executable, or None if it is not installed there

    Raises:
        ExternalProcessError: If the executable fails to report its version
    """
    swift_path = swift_executable_path(Path(prefix), swift_version)

    if not swift_path.is_file():
        logger.debug(f"No swift executable at {swift_path}")
        return None

    logger.info("Inferring basic settings...")
    logger.info(f"- swift executable: {swift_path}")
    output = run_process([str(swift_path), "--version"], timeout=timeout)
    if output:
        logger.info(output.rstrip())

    return swift_path
