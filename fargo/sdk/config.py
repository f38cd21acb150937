"""
Local build configuration reader.

``fx set`` leaves a ``.config`` file at the tree root with shell-style
assignments such as::

    FUCHSIA_BUILD_DIR="out/debug-x64"
    FUCHSIA_VARIANT="debug"

Only the four keys below are read. Unknown keys and lines that are not a
single ``KEY=VALUE`` assignment are skipped.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fargo.core.exceptions import ConfigIOError
from fargo.core.interfaces import EnvironmentProvider, FilesystemProbe
from fargo.sdk.locator import fuchsia_root
from fargo.sdk.paths import CONFIG_FILE_NAME
from fargo.sdk.target import TargetOptions

logger = logging.getLogger(__name__)

_KEY_TO_FIELD = {
    "FUCHSIA_BUILD_DIR": "build_dir",
    "FUCHSIA_VARIANT": "variant",
    "FUCHSIA_ARCH": "arch",
    "ZIRCON_PROJECT": "zircon_project",
}


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


@dataclass
class FuchsiaConfig:
    """
    Settings read from the tree's ``.config`` file.

    Attributes:
        build_dir: FUCHSIA_BUILD_DIR (e.g., 'out/debug-x64')
        variant: FUCHSIA_VARIANT ('debug' or 'release')
        arch: FUCHSIA_ARCH (e.g., 'x86-64')
        zircon_project: ZIRCON_PROJECT
    """

    build_dir: str = ""
    variant: str = ""
    arch: str = ""
    zircon_project: str = ""

    def is_release(self) -> bool:
        """Anything other than an explicit debug variant counts as release."""
        return self.variant != "debug"

    @classmethod
    def parse(cls, text: str) -> "FuchsiaConfig":
        """
        Parse ``.config`` contents.

        Args:
            text: File contents

        Returns:
            FuchsiaConfig with whichever known keys were present
        """
        config = cls()
        for line in text.splitlines():
            parts = line.split("=", 1)
            if len(parts) != 2:
                continue
            field_name = _KEY_TO_FIELD.get(parts[0].strip())
            if field_name is None:
                continue
            setattr(config, field_name, _unquote(parts[1]))
        return config

    @classmethod
    def for_target(
        cls,
        options: TargetOptions,
        env: Optional[EnvironmentProvider] = None,
        fs: Optional[FilesystemProbe] = None,
    ) -> "FuchsiaConfig":
        """Locate the tree for ``options`` and load its configuration."""
        return load_config(fuchsia_root(options, env, fs))


def load_config(root: Path) -> FuchsiaConfig:
    """
    Load the local build configuration of a tree.

    Args:
        root: Tree root containing ``.config``

    Returns:
        Parsed FuchsiaConfig

    Raises:
        ConfigIOError: If the file cannot be opened or read
    """
    config_file = Path(root) / CONFIG_FILE_NAME
    logger.debug(f"Loading build configuration from {config_file}")
    try:
        text = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(config_file, str(e)) from e
    return FuchsiaConfig.parse(text)
