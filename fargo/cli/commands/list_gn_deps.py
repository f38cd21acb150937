"""
list-gn-deps command implementation.
"""

import logging
from pathlib import Path

from fargo.cli.utils import target_options
from fargo.manifest import list_gn_deps

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list-gn-deps command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    dep_names = list_gn_deps(target_options(args), Path(args.crate_path))
    for name in sorted(dep_names):
        print(name)
    return 0
