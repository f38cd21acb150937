"""
Cargo manifest support for fargo.
"""

from fargo.manifest.dependencies import (
    BUILD_FILE_NAME,
    MANIFEST_FILE_NAME,
    find_crates_without_build_files,
    get_dependency_names,
    get_workspace_members,
    list_gn_deps,
    parse_manifest,
)

__all__ = [
    "BUILD_FILE_NAME",
    "MANIFEST_FILE_NAME",
    "find_crates_without_build_files",
    "get_dependency_names",
    "get_workspace_members",
    "list_gn_deps",
    "parse_manifest",
]
