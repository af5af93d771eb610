"""
Install command implementation.

Resolves the Swift toolchain for a version hint and installs it if no local
copy exists.
"""

import logging

from cartonsdk.cli.utils import ProgressBar, load_cli_config, resolve_project_root
from cartonsdk.toolchain.manager import ToolchainManager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_cli_config(args)
    progress = ProgressBar()

    manager = ToolchainManager(
        config=config,
        progress_callback=progress,
        cwd=resolve_project_root(args.project_root),
    )

    try:
        swift_path, version = manager.infer_swift_path(args.version)
    finally:
        progress.finish()

    print(f"Swift {version} is available at {swift_path}")
    return 0
