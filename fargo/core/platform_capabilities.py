"""Platform and target CPU lookup tables.

Every place where the Fuchsia tree layout differs by host operating system or
by target CPU is recorded here as data. Supporting another host or target
architecture means adding an entry, not another branch in the path code.

Host capabilities:
- toolchain_platform: directory under ``buildtools/`` holding the prebuilt clang

Target CPU capabilities:
- linker_name: CPU name used in triples (``x86_64``, ``aarch64``)
- zircon_build: directory under ``out/build-zircon/`` holding the sysroot
"""

from typing import Any, Dict

from fargo.core.exceptions import UnsupportedPlatformError

HOST_CAPABILITIES: Dict[str, Dict[str, Any]] = {
    "linux": {
        "toolchain_platform": "linux-x64",
    },
    "macos": {
        "toolchain_platform": "mac-x64",
    },
}

TARGET_CPU_CAPABILITIES: Dict[str, Dict[str, Any]] = {
    "x64": {
        "linker_name": "x86_64",
        "zircon_build": "build-user-x86-64",
    },
    "arm64": {
        "linker_name": "aarch64",
        "zircon_build": "build-user-arm64",
    },
}

# Tool role -> executable name under <toolchain>/bin
TOOLCHAIN_BINARIES: Dict[str, str] = {
    "cc": "clang",
    "cxx": "clang++",
    "ar": "llvm-ar",
    "ranlib": "llvm-ranlib",
    "linker": "clang",
    "lld": "llvm-lld",
    "strip": "llvm-objcopy",
    "objcopy": "llvm-objcopy",
}


def _lookup(table: Dict[str, Dict[str, Any]], kind: str, key: str, field: str) -> Any:
    entry = table.get(key)
    if entry is None:
        raise UnsupportedPlatformError(kind, key, sorted(table))
    return entry[field]


def toolchain_platform_dir(host: str) -> str:
    """
    Get the buildtools directory name for a host operating system.

    Example:
        >>> toolchain_platform_dir('macos')
        'mac-x64'
    """
    return _lookup(HOST_CAPABILITIES, "host operating system", host, "toolchain_platform")


def zircon_build_dir(target_cpu: str) -> str:
    """
    Get the zircon build directory holding the sysroot for a target CPU.

    Example:
        >>> zircon_build_dir('arm64')
        'build-user-arm64'
    """
    return _lookup(TARGET_CPU_CAPABILITIES, "target CPU", target_cpu, "zircon_build")


def linker_cpu_name(target_cpu: str) -> str:
    """Get the triple CPU name for a target CPU (``x64`` -> ``x86_64``)."""
    return _lookup(TARGET_CPU_CAPABILITIES, "target CPU", target_cpu, "linker_name")
