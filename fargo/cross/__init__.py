"""
Cross-compilation support for fargo.

This module provides the environments needed to run pkg-config and autoconf
configure scripts against a Fuchsia sysroot and toolchain.
"""

from fargo.cross.environment import (
    ConfigureInvocation,
    compose_configure,
    pkg_config_environment,
    run_configure,
    run_pkg_config,
)
from fargo.sdk.paths import native_deps_root, pkg_config_path

__all__ = [
    "ConfigureInvocation",
    "compose_configure",
    "pkg_config_environment",
    "run_configure",
    "run_pkg_config",
    "native_deps_root",
    "pkg_config_path",
]
