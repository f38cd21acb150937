"""
Centralized exception hierarchy for fargo.

This module defines all custom exceptions raised by the SDK path resolution,
environment composition and manifest inspection code, so callers can catch
a single base class or a precise failure category.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class FargoError(Exception):
    """Base exception for all fargo errors."""

    pass


# ============================================================================
# SDK Layout Exceptions
# ============================================================================


class ConfigurationError(FargoError):
    """Raised when ambient configuration (environment, overrides) is invalid."""

    pass


class UnsupportedPlatformError(ConfigurationError):
    """Raised when a host platform or target CPU has no known layout."""

    def __init__(self, kind: str, name: str, supported=()):
        self.kind = kind
        self.name = name
        msg = f"Unsupported {kind}: {name}"
        if supported:
            msg += f". Supported: {', '.join(supported)}"
        super().__init__(msg)


class NotFoundError(FargoError):
    """Raised when the Fuchsia tree or a required directory inside it is missing."""

    pass


class ConfigIOError(FargoError):
    """Raised when a configuration or manifest file cannot be opened or read."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        msg = f"Unable to read {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


# ============================================================================
# Manifest Exceptions
# ============================================================================


class ManifestError(FargoError):
    """Base exception for Cargo manifest errors."""

    pass


class ManifestParseError(ManifestError):
    """Raised when a manifest is not valid TOML."""

    pass


class MissingSectionError(ManifestError):
    """Raised when a required manifest section is absent."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Crate manifest has no [{section}] section")


class SchemaError(ManifestError):
    """Raised when a manifest section has an unexpected shape."""

    pass


# ============================================================================
# Process Exceptions
# ============================================================================


class ProcessError(FargoError):
    """Raised when an external tool cannot be started."""

    pass
