"""
fargo - cross-build native dependencies for Fuchsia.

Locates a Fuchsia tree, derives its toolchain and sysroot paths, and runs
pkg-config and configure scripts with a cross-compilation environment.
"""

from fargo.core.exceptions import FargoError
from fargo.sdk import TargetOptions, derive_paths, fuchsia_root
from fargo.cross import run_configure, run_pkg_config
from fargo.manifest import get_dependency_names

__all__ = [
    "FargoError",
    "TargetOptions",
    "derive_paths",
    "fuchsia_root",
    "run_configure",
    "run_pkg_config",
    "get_dependency_names",
]
