"""
Path derivation for a Fuchsia tree.

Every path fargo needs is a deterministic function of the tree root and the
target options. The public functions below locate the root afresh on each
call; nothing is cached between calls.

Layout:
    <root>/out/<debug|release>-<cpu>/            : target build output
    <root>/out/<debug|release>-<cpu>/gen/        : generated sources
    <root>/out/build-zircon/<zircon build>/sysroot
    <root>/buildtools/<host platform>/clang/bin/ : prebuilt toolchain
    <root>/garnet/target/<triple>/debug/         : cargo output
    <root>/scripts/fx                            : fx helper script
    <root>/.config                               : local build configuration
    $HOME/.fargo/native_deps/<cpu>/              : cross-built native libraries
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from fargo.core.exceptions import ConfigurationError
from fargo.core.interfaces import (
    EnvironmentProvider,
    FilesystemProbe,
    default_environment,
)
from fargo.core.platform import host_os
from fargo.core.platform_capabilities import (
    TOOLCHAIN_BINARIES,
    toolchain_platform_dir,
    zircon_build_dir,
)
from fargo.sdk.locator import fuchsia_root, possible_target_out_dir
from fargo.sdk.target import TargetOptions

CONFIG_FILE_NAME = ".config"


@dataclass(frozen=True)
class SdkPaths:
    """
    Every path derived from a tree root and a set of target options.

    Attributes:
        root: Tree root
        target_out_dir: Build output directory for the target
        target_gen_dir: Generated sources directory
        cargo_out_dir: Cargo build output for the target triple
        native_deps_root: Install prefix for cross-built native libraries
        pkg_config_dir: pkg-config search directory inside native_deps_root
        sysroot: Target sysroot
        toolchain_root: Prebuilt clang toolchain
        tools: Tool role (cc, cxx, ar, ...) to binary path
        fx_path: fx helper script
        config_path: Local build configuration file
    """

    root: Path
    target_out_dir: Path
    target_gen_dir: Path
    cargo_out_dir: Path
    native_deps_root: Path
    pkg_config_dir: Path
    sysroot: Path
    toolchain_root: Path
    tools: Dict[str, Path] = field(default_factory=dict)
    fx_path: Optional[Path] = None
    config_path: Optional[Path] = None

    def to_dict(self) -> Dict[str, object]:
        """Convert to a plain dictionary of strings for reporting."""
        return {
            "root": str(self.root),
            "target_out_dir": str(self.target_out_dir),
            "target_gen_dir": str(self.target_gen_dir),
            "cargo_out_dir": str(self.cargo_out_dir),
            "native_deps_root": str(self.native_deps_root),
            "pkg_config_dir": str(self.pkg_config_dir),
            "sysroot": str(self.sysroot),
            "toolchain_root": str(self.toolchain_root),
            "tools": {role: str(path) for role, path in self.tools.items()},
            "fx_path": str(self.fx_path),
            "config_path": str(self.config_path),
        }


# ============================================================================
# Root-relative rules
# ============================================================================


def _sysroot(root: Path, options: TargetOptions) -> Path:
    return root / "out" / "build-zircon" / zircon_build_dir(options.target_cpu) / "sysroot"


def _toolchain(root: Path, host: Optional[str]) -> Path:
    platform_name = toolchain_platform_dir(host or host_os())
    return root / "buildtools" / platform_name / "clang"


def _cargo_out(root: Path, options: TargetOptions) -> Path:
    return root / "garnet" / "target" / options.target_triple / "debug"


def _tool(toolchain: Path, role: str) -> Path:
    return toolchain / "bin" / TOOLCHAIN_BINARIES[role]


# ============================================================================
# Native dependency prefix
# ============================================================================


def native_deps_root(
    options: TargetOptions, env: Optional[EnvironmentProvider] = None
) -> Path:
    """
    Get the install prefix for cross-built native dependencies.

    Independent of the tree root; keyed only by target CPU.

    Raises:
        ConfigurationError: If HOME is not set
    """
    env = default_environment(env)
    home = env.get("HOME")
    if not home:
        raise ConfigurationError(
            "HOME is not set. Cannot determine native dependency directory."
        )
    return Path(home) / ".fargo" / "native_deps" / options.target_cpu


def pkg_config_path(
    options: TargetOptions, env: Optional[EnvironmentProvider] = None
) -> Path:
    """Get the pkg-config search directory for cross-built dependencies."""
    return native_deps_root(options, env) / "lib" / "pkgconfig"


# ============================================================================
# Tree paths
# ============================================================================


def target_out_dir(
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
) -> Path:
    """
    Get the build output directory of the located tree.

    Raises:
        NotFoundError: If the located root has no matching build output
    """
    return possible_target_out_dir(fuchsia_root(options, env, fs), options, fs)


def target_gen_dir(
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
) -> Path:
    return target_out_dir(options, env, fs) / "gen"


def cargo_out_dir(
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
) -> Path:
    return _cargo_out(fuchsia_root(options, env, fs), options)


def sysroot_path(
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
) -> Path:
    return _sysroot(fuchsia_root(options, env, fs), options)


def toolchain_path(
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
    host: Optional[str] = None,
) -> Path:
    """
    Get the prebuilt clang toolchain for the host running fargo.

    Args:
        options: Target options
        env: Environment provider
        fs: Filesystem probe
        host: Host OS name override ('linux', 'macos'); detected if None

    Raises:
        UnsupportedPlatformError: If the host has no prebuilt toolchain
    """
    return _toolchain(fuchsia_root(options, env, fs), host)


def tool_path(
    role: str,
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
    host: Optional[str] = None,
) -> Path:
    """Get the path of a toolchain binary by role (see TOOLCHAIN_BINARIES)."""
    return _tool(toolchain_path(options, env, fs, host), role)


def clang_c_compiler_path(options, env=None, fs=None, host=None) -> Path:
    return tool_path("cc", options, env, fs, host)


def clang_cpp_compiler_path(options, env=None, fs=None, host=None) -> Path:
    return tool_path("cxx", options, env, fs, host)


def clang_archiver_path(options, env=None, fs=None, host=None) -> Path:
    return tool_path("ar", options, env, fs, host)


def clang_ranlib_path(options, env=None, fs=None, host=None) -> Path:
    return tool_path("ranlib", options, env, fs, host)


def clang_linker_path(options, env=None, fs=None, host=None) -> Path:
    return tool_path("linker", options, env, fs, host)


def lld_path(options, env=None, fs=None, host=None) -> Path:
    return tool_path("lld", options, env, fs, host)


def strip_tool_path(options, env=None, fs=None, host=None) -> Path:
    return tool_path("strip", options, env, fs, host)


def objcopy_path(options, env=None, fs=None, host=None) -> Path:
    return tool_path("objcopy", options, env, fs, host)


def fx_path(
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
) -> Path:
    return fuchsia_root(options, env, fs) / "scripts" / "fx"


def config_path(
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
) -> Path:
    return fuchsia_root(options, env, fs) / CONFIG_FILE_NAME


def derive_paths(
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
    host: Optional[str] = None,
) -> SdkPaths:
    """
    Derive the complete path set for a target.

    Args:
        options: Target options
        env: Environment provider (process environment if None)
        fs: Filesystem probe (real filesystem if None)
        host: Host OS name override; detected if None

    Returns:
        SdkPaths with every derived path

    Raises:
        ConfigurationError: If FUCHSIA_ROOT or HOME are unusable
        NotFoundError: If the tree or its build output cannot be found
        UnsupportedPlatformError: If the host or target CPU is unknown

    Example:
        >>> paths = derive_paths(TargetOptions.new(False))
        >>> paths.sysroot.name
        'sysroot'
    """
    env = default_environment(env)
    root = fuchsia_root(options, env, fs)
    out_dir = possible_target_out_dir(root, options, fs)
    toolchain = _toolchain(root, host)
    deps_root = native_deps_root(options, env)

    return SdkPaths(
        root=root,
        target_out_dir=out_dir,
        target_gen_dir=out_dir / "gen",
        cargo_out_dir=_cargo_out(root, options),
        native_deps_root=deps_root,
        pkg_config_dir=deps_root / "lib" / "pkgconfig",
        sysroot=_sysroot(root, options),
        toolchain_root=toolchain,
        tools={role: _tool(toolchain, role) for role in TOOLCHAIN_BINARIES},
        fx_path=root / "scripts" / "fx",
        config_path=root / CONFIG_FILE_NAME,
    )
