"""
Local command implementation.

Shows or sets the Swift version pinned in the project's .swift-version file.
"""

import logging

from cartonsdk.cli.utils import load_cli_config, resolve_project_root
from cartonsdk.toolchain.manager import ToolchainManager
from cartonsdk.toolchain.version import VERSION_FILE, VERSION_MARKER

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the local command.

    Without a version, prints the version the project resolves to. With a
    version, writes it to .swift-version in the project root.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    project_root = resolve_project_root(args.project_root)

    if not args.version:
        manager = ToolchainManager(config=load_cli_config(args), cwd=project_root)
        print(manager.infer_swift_version())
        return 0

    if VERSION_MARKER not in args.version:
        logger.warning(
            f"'{args.version}' is not a SwiftWasm version and will be ignored "
            f"when resolving the toolchain"
        )

    version_file = project_root / VERSION_FILE
    version_file.write_text(f"{args.version}\n", encoding="utf-8")
    logger.info(f"Wrote {args.version} to {version_file}")
    return 0
