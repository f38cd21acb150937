"""
Host platform detection for fargo.

The prebuilt clang toolchain inside a Fuchsia tree lives in a directory named
after the host it runs on, so path derivation needs a normalized name for the
operating system fargo itself is running on.

Usage:
    from fargo.core.platform import host_os

    print(f"OS: {host_os()}")
"""

import functools
import platform


@functools.lru_cache(maxsize=1)
def host_os() -> str:
    """
    Detect the host operating system.

    This function is cached - it only runs detection once per process.

    Returns:
        Normalized OS name: 'linux', 'macos', or the raw lowercase system
        name for anything else
    """
    system = platform.system().lower()

    if system == "darwin":
        return "macos"
    return system


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to host_os() to re-detect.
    """
    host_os.cache_clear()


__all__ = [
    "host_os",
    "clear_platform_cache",
]
