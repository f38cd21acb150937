"""
Process environments for cross-building native dependencies.

Native libraries needed by Fuchsia crates are built with their own
``configure`` scripts and discovered with ``pkg-config``. Both tools must be
pointed at the Fuchsia sysroot and toolchain and kept away from the host's
libraries:

- ``PKG_CONFIG_PATH`` is emptied and ``PKG_CONFIG_LIBDIR`` replaced so only
  libraries installed under the native dependency prefix are visible.
- ``PKG_CONFIG_ALL_STATIC`` forces static link flags so host shared objects
  never end up in a target binary.
"""

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from fargo.core.exceptions import ProcessError
from fargo.core.interfaces import (
    EnvironmentProvider,
    FilesystemProbe,
    default_environment,
)
from fargo.core.platform_capabilities import TOOLCHAIN_BINARIES
from fargo.sdk.paths import (
    native_deps_root,
    pkg_config_path,
    sysroot_path,
    toolchain_path,
)
from fargo.sdk.target import TargetOptions

logger = logging.getLogger(__name__)

PKG_CONFIG = "pkg-config"

# Environment variable -> toolchain binary role
CONFIGURE_TOOL_VARS = {
    "CC": "cc",
    "CXX": "cxx",
    "RANLIB": "ranlib",
    "LD": "lld",
    "AR": "ar",
}


@dataclass(frozen=True)
class ConfigureInvocation:
    """
    A fully composed ``configure`` command.

    Attributes:
        script: Path of the configure script
        argv: Complete argument vector, script first
        env: Variables set on top of the inherited environment
    """

    script: Path
    argv: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)


def pkg_config_environment(
    options: TargetOptions, env: Optional[EnvironmentProvider] = None
) -> Dict[str, str]:
    """
    Get the variables that restrict pkg-config to cross-built libraries.

    Example:
        >>> pkg_config_environment(TargetOptions.new(False))["PKG_CONFIG_ALL_STATIC"]
        '1'
    """
    return {
        "PKG_CONFIG_PATH": "",
        "PKG_CONFIG_LIBDIR": str(pkg_config_path(options, env)),
        "PKG_CONFIG_ALL_STATIC": "1",
    }


def _log_for(verbose: bool):
    return logger.info if verbose else logger.debug


def _spawn(argv: Sequence[str], child_env: Dict[str, str], tool: str) -> int:
    try:
        result = subprocess.run(list(argv), env=child_env, check=False)
    except OSError as e:
        raise ProcessError(f"Unable to run {tool}: {e}") from e
    return result.returncode


def run_pkg_config(
    verbose: bool,
    args: Sequence[str],
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
) -> int:
    """
    Run pkg-config against the native dependency prefix.

    Args:
        verbose: Log the composed command at INFO instead of DEBUG
        args: Arguments passed through to pkg-config
        options: Target options
        env: Environment provider (process environment if None)

    Returns:
        pkg-config's exit status, or 1 if it was terminated by a signal

    Raises:
        ProcessError: If pkg-config cannot be started
    """
    env = default_environment(env)
    overrides = pkg_config_environment(options, env)
    child_env = env.to_dict()
    child_env.update(overrides)
    argv = [PKG_CONFIG, *args]

    _log_for(verbose)(f"pkg-config: {argv} with {overrides}")

    returncode = _spawn(argv, child_env, PKG_CONFIG)
    if returncode < 0:
        logger.debug(f"pkg-config terminated by signal {-returncode}")
        return 1
    return returncode


def compose_configure(
    use_host: bool,
    args: Sequence[str],
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
    host: Optional[str] = None,
) -> ConfigureInvocation:
    """
    Compose the ``configure`` command for the script in the working directory.

    Args:
        use_host: Pass ``--host=<cpu>-fuchsia-elf`` to the script
        args: Extra arguments appended after the generated ones
        options: Target options
        env: Environment provider (process environment if None)
        fs: Filesystem probe (real filesystem if None)
        host: Host OS name override; detected if None

    Returns:
        ConfigureInvocation ready to run

    Raises:
        ProcessError: If the working directory cannot be canonicalized
        ConfigurationError: If FUCHSIA_ROOT or HOME are unusable
        NotFoundError: If the Fuchsia tree cannot be found
    """
    env = default_environment(env)
    try:
        cwd = env.current_dir().resolve(strict=True)
    except OSError as e:
        raise ProcessError(f"Unable to canonicalize working directory: {e}") from e

    cross_root = native_deps_root(options, env)
    sysroot = sysroot_path(options, env, fs)
    toolchain_bin = toolchain_path(options, env, fs, host) / "bin"

    common_c_flags = (
        f"--sysroot={sysroot} --target={options.clang_target} -fPIC "
        f"-I{cross_root / 'include'}"
    )
    prev_ld_flags = env.get("LDFLAGS") or ""
    ld_flags = " ".join(
        part for part in (prev_ld_flags, common_c_flags, f"-L{cross_root / 'lib'}") if part
    )

    child_env = {
        var: str(toolchain_bin / TOOLCHAIN_BINARIES[role])
        for var, role in CONFIGURE_TOOL_VARS.items()
    }
    child_env.update(
        {
            "CFLAGS": common_c_flags,
            "CXXFLAGS": common_c_flags,
            "CPPFLAGS": common_c_flags,
            "LDFLAGS": ld_flags,
        }
    )
    child_env.update(pkg_config_environment(options, env))

    script = cwd / "configure"
    argv = [str(script)]
    if use_host:
        argv.append(f"--host={options.configure_host}")
    argv.append(f"--prefix={cross_root}")
    argv.extend(args)

    return ConfigureInvocation(script=script, argv=argv, env=child_env)


def run_configure(
    verbose: bool,
    use_host: bool,
    args: Sequence[str],
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
    host: Optional[str] = None,
) -> bool:
    """
    Run the ``configure`` script in the working directory for a Fuchsia target.

    Args:
        verbose: Log sysroot, toolchain, flags and the command at INFO
        use_host: Pass ``--host`` to the script
        args: Extra arguments for the script
        options: Target options
        env: Environment provider (process environment if None)
        fs: Filesystem probe (real filesystem if None)
        host: Host OS name override; detected if None

    Returns:
        True if configure exited successfully

    Raises:
        ProcessError: If the script cannot be started
    """
    env = default_environment(env)
    invocation = compose_configure(use_host, args, options, env, fs, host)

    log = _log_for(verbose)
    log(f"CFLAGS: {env.get('CFLAGS') or ''}")
    log(f"LDFLAGS: {invocation.env['LDFLAGS']}")
    log(f"configure: {invocation.argv}")

    child_env = env.to_dict()
    child_env.update(invocation.env)
    return _spawn(invocation.argv, child_env, "configure") == 0
