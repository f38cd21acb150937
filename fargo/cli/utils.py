"""
Shared utilities for CLI commands.
"""

import sys
from typing import Optional

from fargo.sdk.target import TargetOptions


def target_options(args) -> TargetOptions:
    """
    Build target options from the global --release/--device flags.

    Args:
        args: Parsed command-line arguments

    Returns:
        TargetOptions for the default CPU
    """
    return TargetOptions.new(
        getattr(args, "release", False), getattr(args, "device", None)
    )


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)
