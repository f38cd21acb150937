"""
Fuchsia SDK layout for fargo.

This package locates a Fuchsia tree and derives the toolchain, sysroot and
build output paths used when cross-compiling for a Fuchsia target.
"""

from fargo.sdk.target import TargetOptions
from fargo.sdk.locator import FUCHSIA_ROOT_VAR, fuchsia_root, possible_target_out_dir
from fargo.sdk.paths import (
    SdkPaths,
    derive_paths,
    target_out_dir,
    target_gen_dir,
    cargo_out_dir,
    native_deps_root,
    pkg_config_path,
    sysroot_path,
    toolchain_path,
    tool_path,
    clang_c_compiler_path,
    clang_cpp_compiler_path,
    clang_archiver_path,
    clang_ranlib_path,
    clang_linker_path,
    lld_path,
    strip_tool_path,
    objcopy_path,
    fx_path,
    config_path,
)
from fargo.sdk.config import FuchsiaConfig, load_config

__all__ = [
    "TargetOptions",
    "FUCHSIA_ROOT_VAR",
    "fuchsia_root",
    "possible_target_out_dir",
    "SdkPaths",
    "derive_paths",
    "target_out_dir",
    "target_gen_dir",
    "cargo_out_dir",
    "native_deps_root",
    "pkg_config_path",
    "sysroot_path",
    "toolchain_path",
    "tool_path",
    "clang_c_compiler_path",
    "clang_cpp_compiler_path",
    "clang_archiver_path",
    "clang_ranlib_path",
    "clang_linker_path",
    "lld_path",
    "strip_tool_path",
    "objcopy_path",
    "fx_path",
    "config_path",
    "FuchsiaConfig",
    "load_config",
]
