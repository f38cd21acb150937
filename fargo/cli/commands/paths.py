"""
Paths command implementation.

Reports the Fuchsia tree, toolchain, sysroot and native dependency paths
derived for the selected target.
"""

import logging

import yaml

from fargo.cli.utils import target_options
from fargo.sdk import derive_paths

logger = logging.getLogger(__name__)


def format_text(report: dict) -> str:
    """Format a path report as aligned ``name: value`` lines."""
    lines = []
    for key, value in report.items():
        if isinstance(value, dict):
            lines.append(f"{key}:")
            for role, path in value.items():
                lines.append(f"  {role:<8} {path}")
        else:
            lines.append(f"{key:<17} {value}")
    return "\n".join(lines)


def run(args) -> int:
    """
    Run the paths command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    options = target_options(args)
    report = derive_paths(options).to_dict()
    logger.debug(f"Derived {len(report)} path entries for {options.out_dir_name}")

    if args.format == "yaml":
        print(yaml.safe_dump(report, default_flow_style=False, sort_keys=False), end="")
    else:
        print(format_text(report))
    return 0
