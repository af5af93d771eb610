"""
External process execution.

Thin wrapper around subprocess.run that captures output and turns start-up
failures and non-zero exits into ExternalProcessError.
"""

import logging
import subprocess
from typing import Optional, Sequence

from cartonsdk.core.exceptions import ExternalProcessError

logger = logging.getLogger(__name__)


def run_process(args: Sequence[str], timeout: Optional[float] = None) -> str:
    """
    Run a process and return its combined output.

    Args:
        args: Program and arguments
        timeout: Optional timeout in seconds

    Returns:
        Captured stdout followed by stderr

    Raises:
        ExternalProcessError: If the process cannot be started, times out,
            or exits with a non-zero code
    """
    args = [str(arg) for arg in args]
    logger.debug(f"Running: {' '.join(args)}")

    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ExternalProcessError(args, output=f"timed out after {timeout}s") from e
    except OSError as e:
        raise ExternalProcessError(args, output=str(e)) from e

    output = result.stdout + result.stderr
    if result.returncode != 0:
        raise ExternalProcessError(args, returncode=result.returncode, output=output)

    return output
