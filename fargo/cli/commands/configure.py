"""
Configure command implementation.

Runs the configure script in the current directory for a Fuchsia target.
"""

import logging

from fargo.cli.utils import print_error, target_options
from fargo.cross import run_configure

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the configure command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    logger.debug(f"Arguments: {args}")

    if run_configure(args.verbose, not args.no_host, args.args, target_options(args)):
        return 0

    print_error("configure failed")
    return 1
