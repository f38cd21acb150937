"""
Mock implementations for testing fargo components.

This package provides mock implementations of system interactions to enable
isolated, deterministic testing.
"""

from .filesystem import MockFilesystem

__all__ = [
    "MockFilesystem",
]
