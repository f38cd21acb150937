"""
Fuchsia tree root discovery.

The root is either named explicitly by ``FUCHSIA_ROOT`` or found by walking up
from the working directory until a directory containing a build output for
the requested target is reached.
"""

import logging
from pathlib import Path
from typing import Optional

from fargo.core.exceptions import ConfigurationError, NotFoundError
from fargo.core.interfaces import (
    EnvironmentProvider,
    FilesystemProbe,
    default_environment,
    default_filesystem,
)
from fargo.sdk.target import TargetOptions

logger = logging.getLogger(__name__)

FUCHSIA_ROOT_VAR = "FUCHSIA_ROOT"


def possible_target_out_dir(
    fuchsia_root: Path,
    options: TargetOptions,
    fs: Optional[FilesystemProbe] = None,
) -> Path:
    """
    Get the build output directory a candidate root would have.

    Args:
        fuchsia_root: Candidate tree root
        options: Target options selecting debug/release and CPU
        fs: Filesystem probe (real filesystem if None)

    Returns:
        ``<fuchsia_root>/out/<debug|release>-<cpu>``

    Raises:
        NotFoundError: If that directory does not exist
    """
    fs = default_filesystem(fs)
    target_out_dir = Path(fuchsia_root) / "out" / options.out_dir_name
    if not fs.is_dir(target_out_dir):
        raise NotFoundError(f"No target out directory found at {target_out_dir}")
    return target_out_dir


def fuchsia_root(
    options: TargetOptions,
    env: Optional[EnvironmentProvider] = None,
    fs: Optional[FilesystemProbe] = None,
) -> Path:
    """
    Locate the root of the Fuchsia tree.

    ``FUCHSIA_ROOT`` wins when set and is trusted as long as it is a
    directory; a relative value is taken from the working directory.
    Otherwise every ancestor of the working directory, nearest
    first, is tested for an ``out/<debug|release>-<cpu>`` directory.

    Args:
        options: Target options selecting the build output to look for
        env: Environment provider (process environment if None)
        fs: Filesystem probe (real filesystem if None)

    Returns:
        Path to the tree root

    Raises:
        ConfigurationError: If FUCHSIA_ROOT is empty or not a directory
        NotFoundError: If no ancestor holds a matching build output
    """
    env = default_environment(env)
    fs = default_filesystem(fs)

    override = env.get(FUCHSIA_ROOT_VAR)
    if override is not None:
        if not override:
            raise ConfigurationError(
                f"{FUCHSIA_ROOT_VAR} is set but empty. Unset it or point it to a "
                f"Fuchsia tree."
            )
        root = Path(override)
        if not root.is_absolute():
            root = env.current_dir() / root
        if not fs.is_dir(root):
            raise ConfigurationError(
                f"{FUCHSIA_ROOT_VAR} is set to '{override}' but that path does not "
                f"point to a directory."
            )
        logger.debug(f"Using {FUCHSIA_ROOT_VAR}={root}")
        return root

    start = env.current_dir()
    for candidate in (start, *start.parents):
        if fs.is_dir(candidate / "out" / options.out_dir_name):
            logger.debug(f"Found Fuchsia root at {candidate}")
            return candidate

    raise NotFoundError(
        f"{FUCHSIA_ROOT_VAR} not set and current directory is not in a Fuchsia tree "
        f"with a {options.out_dir_name} build. You must set the environment variable "
        f"{FUCHSIA_ROOT_VAR} to point to a Fuchsia tree with a {options.out_dir_name} "
        f"build."
    )
