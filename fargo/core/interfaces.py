"""
Core interfaces for fargo.

The SDK resolver never touches ``os.environ``, the working directory or the
filesystem directly. It goes through the two small capabilities defined here,
so the tree search and path derivation can run against an in-memory tree
and an arbitrary environment in tests.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Optional


class EnvironmentProvider(ABC):
    """
    Abstract source of environment variables and the working directory.
    """

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """
        Look up an environment variable.

        Args:
            name: Variable name (e.g., "HOME", "FUCHSIA_ROOT")

        Returns:
            The value, or None if the variable is not set
        """
        pass

    @abstractmethod
    def current_dir(self) -> Path:
        """
        Get the directory the ascending tree search starts from.

        Returns:
            Absolute path of the working directory
        """
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, str]:
        """
        Get a copy of the full environment, used as the base for child processes.
        """
        pass


class ProcessEnvironment(EnvironmentProvider):
    """Environment provider backed by the real process state."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def current_dir(self) -> Path:
        return Path.cwd()

    def to_dict(self) -> Dict[str, str]:
        return dict(os.environ)


class MappingEnvironment(EnvironmentProvider):
    """
    Environment provider over a fixed mapping and working directory.

    Example:
        >>> env = MappingEnvironment({"HOME": "/home/dev"}, cwd=Path("/src/fuchsia"))
        >>> env.get("HOME")
        '/home/dev'
    """

    def __init__(self, variables: Optional[Mapping[str, str]] = None, cwd=None):
        self.variables: Dict[str, str] = dict(variables or {})
        self.cwd = Path(cwd) if cwd is not None else Path("/")

    def get(self, name: str) -> Optional[str]:
        return self.variables.get(name)

    def current_dir(self) -> Path:
        return self.cwd

    def to_dict(self) -> Dict[str, str]:
        return dict(self.variables)


class FilesystemProbe(ABC):
    """
    Abstract read-only view of the filesystem used by the tree locator.
    """

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """
        Check whether a path names an existing directory.

        Args:
            path: Path to test

        Returns:
            True if the path exists and is a directory
        """
        pass


class LocalFilesystem(FilesystemProbe):
    """Filesystem probe backed by the real disk."""

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()


def default_environment(env: Optional[EnvironmentProvider] = None) -> EnvironmentProvider:
    """Return ``env`` or a provider over the real process environment."""
    return env if env is not None else ProcessEnvironment()


def default_filesystem(fs: Optional[FilesystemProbe] = None) -> FilesystemProbe:
    """Return ``fs`` or a probe over the real filesystem."""
    return fs if fs is not None else LocalFilesystem()


__all__ = [
    "EnvironmentProvider",
    "ProcessEnvironment",
    "MappingEnvironment",
    "FilesystemProbe",
    "LocalFilesystem",
    "default_environment",
    "default_filesystem",
]
