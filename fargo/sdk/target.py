"""
Fuchsia target description.

This module provides the value that bundles the per-target parameters needed
by path derivation and environment composition.
"""

from dataclasses import dataclass
from typing import Optional

from fargo.core.platform_capabilities import linker_cpu_name

DEFAULT_TARGET_CPU = "x64"


@dataclass(frozen=True)
class TargetOptions:
    """
    Parameters specific to the Fuchsia target being built for.

    Only x64 targets can be constructed through ``new`` for now; the CPU
    fields exist so ARM targets can be added without changing callers.

    Attributes:
        release_os: Use the release build of the OS instead of debug
        target_cpu: Fuchsia CPU name (e.g., 'x64')
        target_cpu_linker: CPU name used in triples (e.g., 'x86_64')
        device_name: Optional name of the device to talk to
    """

    release_os: bool
    target_cpu: str
    target_cpu_linker: str
    device_name: Optional[str] = None

    @classmethod
    def new(cls, release_os: bool, device_name: Optional[str] = None) -> "TargetOptions":
        """
        Construct options for the default x64 target.

        Example:
            >>> options = TargetOptions.new(True, "ivy-donut-grew-stoop")
            >>> options.target_cpu
            'x64'
        """
        return cls(
            release_os=release_os,
            target_cpu=DEFAULT_TARGET_CPU,
            target_cpu_linker=linker_cpu_name(DEFAULT_TARGET_CPU),
            device_name=device_name,
        )

    @property
    def out_dir_name(self) -> str:
        """Name of the build output directory, e.g. 'release-x64'."""
        prefix = "release" if self.release_os else "debug"
        return f"{prefix}-{self.target_cpu}"

    @property
    def target_triple(self) -> str:
        """Rust target triple, e.g. 'x86_64-unknown-fuchsia'."""
        return f"{self.target_cpu_linker}-unknown-fuchsia"

    @property
    def clang_target(self) -> str:
        """Clang ``--target`` value, e.g. 'x86_64-fuchsia'."""
        return f"{self.target_cpu_linker}-fuchsia"

    @property
    def configure_host(self) -> str:
        """Autoconf ``--host`` value, e.g. 'x86_64-fuchsia-elf'."""
        return f"{self.target_cpu_linker}-fuchsia-elf"
