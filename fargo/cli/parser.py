"""
fargo CLI argument parser.

This module implements the command-line interface for fargo using argparse.
"""

import argparse
import importlib
import logging
import sys
from typing import List, Optional

from fargo.core.exceptions import FargoError

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("fargo")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """fargo command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="fargo",
            description="fargo - cross-build native dependencies for Fuchsia",
            epilog='Use "fargo COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"fargo {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--release",
            action="store_true",
            help="Use the release build of the OS instead of debug",
        )
        parser.add_argument(
            "--device",
            "-N",
            metavar="NAME",
            help="Name of the device to target",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_pkg_config_command(subparsers)
        self._add_configure_command(subparsers)
        self._add_paths_command(subparsers)
        self._add_list_gn_deps_command(subparsers)
        self._add_check_build_files_command(subparsers)

        return parser

    def _add_pkg_config_command(self, subparsers):
        """Add 'pkg-config' subcommand."""
        parser = subparsers.add_parser(
            "pkg-config",
            help="Run pkg-config against cross-built libraries",
            description=(
                "Run pkg-config restricted to the native dependency prefix. "
                'Separate pkg-config options with "--", e.g. '
                '"fargo pkg-config -- --cflags zlib".'
            ),
        )
        parser.add_argument(
            "args", nargs="*", metavar="ARG", help="Arguments for pkg-config"
        )

    def _add_configure_command(self, subparsers):
        """Add 'configure' subcommand."""
        parser = subparsers.add_parser(
            "configure",
            help="Run ./configure for a Fuchsia target",
            description=(
                "Run the configure script in the current directory with the "
                "Fuchsia toolchain, sysroot and native dependency prefix. "
                'Separate configure options with "--".'
            ),
        )
        parser.add_argument(
            "--no-host",
            action="store_true",
            help="Do not pass --host to configure",
        )
        parser.add_argument(
            "args", nargs="*", metavar="ARG", help="Arguments for configure"
        )

    def _add_paths_command(self, subparsers):
        """Add 'paths' subcommand."""
        parser = subparsers.add_parser(
            "paths",
            help="Show Fuchsia tree, toolchain and sysroot paths",
            description="Show every path derived for the selected target",
        )
        parser.add_argument(
            "--format",
            choices=["text", "yaml"],
            default="text",
            help="Output format [default: text]",
        )

    def _add_list_gn_deps_command(self, subparsers):
        """Add 'list-gn-deps' subcommand."""
        parser = subparsers.add_parser(
            "list-gn-deps",
            help="List the direct dependencies of a crate",
            description="List the dependencies declared in a crate's Cargo.toml",
        )
        parser.add_argument(
            "crate_path",
            nargs="?",
            default=".",
            metavar="CRATE_PATH",
            help="Crate directory (default: current directory)",
        )

    def _add_check_build_files_command(self, subparsers):
        """Add 'check-build-files' subcommand."""
        parser = subparsers.add_parser(
            "check-build-files",
            help="Find workspace crates without BUILD.gn",
            description="List members of a Cargo workspace that have no BUILD.gn",
        )
        parser.add_argument(
            "workspace_dir",
            nargs="?",
            default=".",
            metavar="WORKSPACE_DIR",
            help="Workspace directory (default: current directory)",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except FargoError as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "pkg-config": "fargo.cli.commands.pkg_config",
            "configure": "fargo.cli.commands.configure",
            "paths": "fargo.cli.commands.paths",
            "list-gn-deps": "fargo.cli.commands.list_gn_deps",
            "check-build-files": "fargo.cli.commands.check_build_files",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
