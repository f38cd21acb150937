"""
pkg-config command implementation.

Runs pkg-config restricted to the cross-built native dependency prefix.
"""

import logging

from fargo.cli.utils import target_options
from fargo.cross import run_pkg_config

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the pkg-config command.

    Args:
        args: Parsed command-line arguments

    Returns:
        pkg-config's exit status
    """
    logger.debug(f"Arguments: {args}")
    return run_pkg_config(args.verbose, args.args, target_options(args))
