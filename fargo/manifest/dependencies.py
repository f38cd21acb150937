"""
Cargo manifest inspection.

Reads ``Cargo.toml`` documents to find the crates a package depends on
directly and the members of a workspace, as input for generating GN build
rules. No version solving is done: only names declared in the manifest
itself are reported.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Set

from fargo.core.exceptions import (
    ConfigIOError,
    ManifestParseError,
    MissingSectionError,
    SchemaError,
)
from fargo.sdk.target import TargetOptions

logger = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "Cargo.toml"
BUILD_FILE_NAME = "BUILD.gn"

# Characters that make a workspace member a glob pattern
GLOB_CHARACTERS = frozenset("*?[")


def parse_manifest(manifest: str) -> Dict[str, Any]:
    """
    Parse a Cargo manifest.

    Raises:
        ManifestParseError: If the text is not valid TOML
    """
    try:
        return tomllib.loads(manifest)
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(f"Invalid crate manifest: {e}") from e


def read_manifest(path: Path) -> str:
    """
    Read a manifest file.

    Raises:
        ConfigIOError: If the file cannot be opened or read
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(path, str(e)) from e


def get_dependency_names(manifest: str) -> Set[str]:
    """
    Get the names of the dependencies declared in a crate manifest.

    Every dependency must be declared with a plain version string; path,
    git or table-style dependencies are rejected so the caller never acts on
    a partial set.

    Args:
        manifest: Contents of Cargo.toml

    Returns:
        Set of dependency names

    Raises:
        ManifestParseError: If the manifest is not valid TOML
        MissingSectionError: If there is no [dependencies] section
        SchemaError: If [dependencies] is not a table or has a non-string value

    Example:
        >>> get_dependency_names('[dependencies]\\nfutures = "0.1.15"\\n')
        {'futures'}
    """
    decoded = parse_manifest(manifest)

    if "dependencies" not in decoded:
        raise MissingSectionError("dependencies")

    deps = decoded["dependencies"]
    if not isinstance(deps, dict):
        raise SchemaError("Crate manifest dependencies not a table")

    dep_set = set()
    for name, value in deps.items():
        if not isinstance(value, str):
            raise SchemaError(f"Crate {name} manifest has a non-string dependency")
        dep_set.add(name)
    return dep_set


def list_gn_deps(options: TargetOptions, crate_path: Path) -> Set[str]:
    """
    Get the direct dependencies of the crate in ``crate_path``.

    Args:
        options: Target options the dependencies are listed for
        crate_path: Directory containing Cargo.toml

    Returns:
        Set of dependency names

    Raises:
        ConfigIOError: If the crate directory or its manifest cannot be read
        ManifestError: If the manifest is invalid
    """
    try:
        full_path = Path(crate_path).resolve(strict=True)
    except OSError as e:
        raise ConfigIOError(crate_path, str(e)) from e

    logger.debug(f"Listing dependencies of {full_path} for {options.target_triple}")
    return get_dependency_names(read_manifest(full_path / MANIFEST_FILE_NAME))


def get_workspace_members(workspace: str) -> List[str]:
    """
    Get the member patterns of a workspace manifest.

    Args:
        workspace: Contents of the workspace Cargo.toml

    Returns:
        Member paths or glob patterns, in declaration order

    Raises:
        ManifestParseError: If the manifest is not valid TOML
        MissingSectionError: If there is no [workspace] section
        SchemaError: If members is not a list of strings
    """
    decoded = parse_manifest(workspace)

    section = decoded.get("workspace")
    if section is None:
        raise MissingSectionError("workspace")
    if not isinstance(section, dict):
        raise SchemaError("Workspace manifest [workspace] not a table")

    members = section.get("members", [])
    if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
        raise SchemaError("Workspace members must be a list of strings")
    return members


def _expand_members(workspace_dir: Path, patterns: List[str], excluded: Set[Path]) -> List[Path]:
    crates = []
    for pattern in patterns:
        if GLOB_CHARACTERS.intersection(pattern):
            candidates = sorted(workspace_dir.glob(pattern))
        else:
            candidates = [workspace_dir / pattern]
        for candidate in candidates:
            if candidate in excluded or candidate in crates:
                continue
            if (candidate / MANIFEST_FILE_NAME).is_file():
                crates.append(candidate)
            else:
                logger.debug(f"Skipping workspace member without manifest: {candidate}")
    return crates


def find_crates_without_build_files(workspace_dir: Path) -> Set[str]:
    """
    Find workspace members that have no BUILD.gn next to their Cargo.toml.

    Member globs are expanded relative to the workspace directory and
    entries listed under ``workspace.exclude`` are ignored.

    Args:
        workspace_dir: Directory containing the workspace Cargo.toml

    Returns:
        Member paths relative to the workspace, POSIX style

    Raises:
        ConfigIOError: If the workspace manifest cannot be read
        ManifestError: If the workspace manifest is invalid or names a
            member outside the workspace
    """
    workspace_dir = Path(workspace_dir)
    text = read_manifest(workspace_dir / MANIFEST_FILE_NAME)
    members = get_workspace_members(text)

    exclude = parse_manifest(text)["workspace"].get("exclude", [])
    if not isinstance(exclude, list) or not all(isinstance(e, str) for e in exclude):
        raise SchemaError("Workspace exclude must be a list of strings")
    excluded = {workspace_dir / entry for entry in exclude}

    root = workspace_dir.resolve()
    missing = set()
    for crate_dir in _expand_members(workspace_dir, members, excluded):
        resolved = crate_dir.resolve()
        if not resolved.is_relative_to(root):
            raise SchemaError(
                f"Workspace member {crate_dir} is outside the workspace {root}"
            )
        if not (crate_dir / BUILD_FILE_NAME).is_file():
            missing.add(resolved.relative_to(root).as_posix())
    return missing
