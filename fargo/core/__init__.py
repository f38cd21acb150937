"""
Core functionality for fargo.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    FargoError,
    ConfigurationError,
    UnsupportedPlatformError,
    NotFoundError,
    ConfigIOError,
    ManifestError,
    ManifestParseError,
    MissingSectionError,
    SchemaError,
    ProcessError,
)

from .interfaces import (
    EnvironmentProvider,
    ProcessEnvironment,
    MappingEnvironment,
    FilesystemProbe,
    LocalFilesystem,
)

from .platform import (
    host_os,
    clear_platform_cache,
)

__all__ = [
    "FargoError",
    "ConfigurationError",
    "UnsupportedPlatformError",
    "NotFoundError",
    "ConfigIOError",
    "ManifestError",
    "ManifestParseError",
    "MissingSectionError",
    "SchemaError",
    "ProcessError",
    "EnvironmentProvider",
    "ProcessEnvironment",
    "MappingEnvironment",
    "FilesystemProbe",
    "LocalFilesystem",
    "host_os",
    "clear_platform_cache",
]
