"""
check-build-files command implementation.

Lists members of a Cargo workspace that still need a BUILD.gn.
"""

import logging
from pathlib import Path

from fargo.manifest import BUILD_FILE_NAME, find_crates_without_build_files

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the check-build-files command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every member has a build file, 1 otherwise)
    """
    missing = find_crates_without_build_files(Path(args.workspace_dir))
    if not missing:
        logger.info(f"All workspace members have a {BUILD_FILE_NAME}")
        return 0

    for member in sorted(missing):
        print(member)
    logger.warning(f"{len(missing)} workspace member(s) without {BUILD_FILE_NAME}")
    return 1
