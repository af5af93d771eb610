"""
Versions command implementation.

Lists every Swift toolchain version found in the installation roots.
"""

import logging

from cartonsdk.cli.utils import load_cli_config, resolve_project_root
from cartonsdk.toolchain.manager import ToolchainManager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the versions command.

    The version the project resolves to is marked with '*'.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    manager = ToolchainManager(
        config=load_cli_config(args),
        cwd=resolve_project_root(args.project_root),
    )

    versions = manager.fetch_all_swift_versions()
    if not versions:
        logger.info("No Swift toolchains installed")
        return 0

    current = manager.infer_swift_version()
    for version in versions:
        marker = "*" if version == current else " "
        print(f"{marker} {version}")

    return 0
