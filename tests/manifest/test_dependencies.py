"""
Unit tests for Cargo manifest inspection.
"""

import pytest

from fargo.core.exceptions import (
    ConfigIOError,
    ManifestError,
    ManifestParseError,
    MissingSectionError,
    SchemaError,
)
from fargo.manifest.dependencies import (
    find_crates_without_build_files,
    get_dependency_names,
    get_workspace_members,
    list_gn_deps,
)

FUCHSIA_APP_CONTENTS = """
# Copyright 2017 The Fuchsia Authors. All rights reserved.

[package]
name = "fuchsia-app"
version = "0.1.0"
license = "BSD-3-Clause"
description = "Library for managing Fuchsia applications and services"

[dependencies]
fdio = "0.2.0"
fidl = "0.1.0"
fuchsia-zircon = "0.3.2"
futures = "0.1.15"
garnet_examples_fidl_services = "0.1.0"
garnet_public_lib_app_fidl = "0.1.0"
garnet_public_lib_app_fidl_service_provider = "0.1.0"
mxruntime = "0.1.0"
tokio-core = "0.1"
tokio-fuchsia = "0.1.0"
"""

WORKSPACE_CONTENTS = """
[workspace]
members = [
  "bin/device_settings",
  "examples/fidl/*_rust",
  "public/rust/crates/fdio",
  "public/rust/crates/fuchsia-zircon",
  "public/rust/crates/missing",
]
exclude = ["examples/fidl/old_rust"]

[patch.crates-io]
fdio = { path = "public/rust/crates/fdio" }
"""


class TestGetDependencyNames:
    """Tests for get_dependency_names()."""

    def test_fuchsia_app_manifest(self):
        result = get_dependency_names(FUCHSIA_APP_CONTENTS)

        assert len(result) == 10
        assert "tokio-fuchsia" in result

    def test_three_dependencies(self):
        manifest = '[dependencies]\nfdio = "0.2.0"\nfidl = "0.1.0"\nfutures = "0.1.15"\n'

        assert get_dependency_names(manifest) == {"fdio", "fidl", "futures"}

    def test_empty_dependencies(self):
        assert get_dependency_names("[dependencies]\n") == set()

    def test_nested_table_rejected(self):
        manifest = (
            "[dependencies]\n"
            'fdio = "0.2.0"\n'
            'fidl = { path = "../fidl" }\n'
        )

        with pytest.raises(SchemaError, match="fidl"):
            get_dependency_names(manifest)

    def test_array_rejected(self):
        with pytest.raises(SchemaError, match="weird"):
            get_dependency_names('[dependencies]\nweird = ["1.0"]\n')

    def test_dependencies_not_a_table(self):
        with pytest.raises(SchemaError, match="not a table"):
            get_dependency_names('dependencies = "none"\n')

    def test_missing_section(self):
        with pytest.raises(MissingSectionError):
            get_dependency_names('[package]\nname = "lonely"\n')

    def test_parse_error_propagates(self):
        with pytest.raises(ManifestParseError):
            get_dependency_names("[dependencies\nfdio = ")

    def test_errors_share_base(self):
        with pytest.raises(ManifestError):
            get_dependency_names("[package]\n")


class TestListGnDeps:
    """Tests for list_gn_deps()."""

    def test_reads_crate_manifest(self, tmp_path, debug_options):
        (tmp_path / "Cargo.toml").write_text(FUCHSIA_APP_CONTENTS)

        result = list_gn_deps(debug_options, tmp_path)

        assert "fdio" in result and len(result) == 10

    def test_missing_manifest(self, tmp_path, debug_options):
        with pytest.raises(ConfigIOError, match="Cargo.toml"):
            list_gn_deps(debug_options, tmp_path)

    def test_missing_crate_dir(self, tmp_path, debug_options):
        with pytest.raises(ConfigIOError):
            list_gn_deps(debug_options, tmp_path / "absent")


class TestWorkspaceMembers:
    """Tests for workspace member discovery."""

    def test_members(self):
        members = get_workspace_members(WORKSPACE_CONTENTS)

        assert members[0] == "bin/device_settings"
        assert "examples/fidl/*_rust" in members

    def test_no_workspace(self):
        with pytest.raises(MissingSectionError, match="workspace"):
            get_workspace_members('[package]\nname = "x"\n')

    def test_members_wrong_shape(self):
        with pytest.raises(SchemaError):
            get_workspace_members('[workspace]\nmembers = "bin/*"\n')

    def test_crates_without_build_files(self, tmp_path):
        (tmp_path / "Cargo.toml").write_text(WORKSPACE_CONTENTS)
        crates = {
            "bin/device_settings": True,
            "examples/fidl/echo_rust": False,
            "examples/fidl/calc_rust": True,
            "examples/fidl/old_rust": False,
            "public/rust/crates/fdio": False,
            "public/rust/crates/fuchsia-zircon": True,
        }
        for rel, has_build in crates.items():
            crate_dir = tmp_path / rel
            crate_dir.mkdir(parents=True)
            (crate_dir / "Cargo.toml").write_text(f'[package]\nname = "{crate_dir.name}"\n')
            if has_build:
                (crate_dir / "BUILD.gn").write_text("")

        result = find_crates_without_build_files(tmp_path)

        assert result == {"examples/fidl/echo_rust", "public/rust/crates/fdio"}

    def test_no_workspace_manifest(self, tmp_path):
        with pytest.raises(ConfigIOError):
            find_crates_without_build_files(tmp_path)

    def test_member_outside_workspace(self, tmp_path, monkeypatch):
        """Test a member that escapes the workspace is a schema error."""
        workspace = tmp_path / "workspace"
        workspace.mkdir()
        (workspace / "Cargo.toml").write_text('[workspace]\nmembers = ["../shared"]\n')
        shared = tmp_path / "shared"
        shared.mkdir()
        (shared / "Cargo.toml").write_text('[package]\nname = "shared"\n')
        monkeypatch.chdir(workspace)

        with pytest.raises(SchemaError, match="outside the workspace"):
            find_crates_without_build_files(".")

    def test_relative_workspace_dir(self, tmp_path, monkeypatch):
        (tmp_path / "Cargo.toml").write_text('[workspace]\nmembers = ["crates/a"]\n')
        (tmp_path / "crates" / "a").mkdir(parents=True)
        (tmp_path / "crates" / "a" / "Cargo.toml").write_text('[package]\nname = "a"\n')
        monkeypatch.chdir(tmp_path)

        assert find_crates_without_build_files(".") == {"crates/a"}

    def test_exclude_must_hold_strings(self, tmp_path):
        (tmp_path / "Cargo.toml").write_text('[workspace]\nmembers = []\nexclude = [1]\n')

        with pytest.raises(SchemaError, match="exclude"):
            find_crates_without_build_files(tmp_path)

    def test_bracket_pattern_is_expanded(self, tmp_path):
        (tmp_path / "Cargo.toml").write_text('[workspace]\nmembers = ["crates/[ab]"]\n')
        for name in ("a", "b", "c"):
            (tmp_path / "crates" / name).mkdir(parents=True)
            (tmp_path / "crates" / name / "Cargo.toml").write_text('[package]\n')

        assert find_crates_without_build_files(tmp_path) == {"crates/a", "crates/b"}
