"""
Pytest configuration and shared fixtures for fargo tests.
"""

import pytest

from fargo.core.interfaces import MappingEnvironment
from fargo.core.platform import clear_platform_cache
from fargo.sdk.target import TargetOptions

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.trees import (
    fuchsia_tree,
    fuchsia_tree_with_config,
    fake_home,
)
from tests.mocks import MockFilesystem


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def debug_options() -> TargetOptions:
    """Target options for a debug x64 build."""
    return TargetOptions.new(False)


@pytest.fixture
def release_options() -> TargetOptions:
    """Target options for a release x64 build."""
    return TargetOptions.new(True)


@pytest.fixture
def mock_fs() -> MockFilesystem:
    """Empty in-memory filesystem."""
    return MockFilesystem()


@pytest.fixture
def tree_env(fuchsia_tree, fake_home) -> MappingEnvironment:
    """Environment whose working directory is deep inside the Fuchsia tree."""
    cwd = fuchsia_tree / "garnet" / "lib" / "rust"
    cwd.mkdir(parents=True)
    return MappingEnvironment(
        {"HOME": str(fake_home), "PATH": "/usr/bin:/bin"}, cwd=cwd
    )


@pytest.fixture(autouse=True)
def _reset_platform_cache():
    """Clear cached host detection between tests."""
    clear_platform_cache()
    yield
    clear_platform_cache()
