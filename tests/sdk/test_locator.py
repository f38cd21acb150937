"""
Unit tests for Fuchsia tree root discovery.

Tests cover:
- Ascending search over an in-memory tree
- FUCHSIA_ROOT override handling
- Failure when no ancestor qualifies
- Real filesystem search
"""

from pathlib import Path

import pytest

from fargo.core.exceptions import ConfigurationError, NotFoundError
from fargo.core.interfaces import MappingEnvironment
from fargo.sdk.locator import fuchsia_root, possible_target_out_dir
from fargo.sdk.target import TargetOptions


class TestAscendingSearch:
    """Tests for the search from the working directory."""

    @pytest.mark.parametrize(
        "start",
        [
            "/src/fuchsia",
            "/src/fuchsia/garnet",
            "/src/fuchsia/garnet/bin/app/src",
        ],
    )
    def test_finds_ancestor_from_any_descendant(self, mock_fs, debug_options, start):
        """Test the qualifying ancestor is found regardless of start depth."""
        mock_fs.mkdir("/src/fuchsia/out/debug-x64")
        mock_fs.mkdir(start)
        env = MappingEnvironment(cwd=start)

        assert fuchsia_root(debug_options, env, mock_fs) == Path("/src/fuchsia")

    def test_nearest_ancestor_wins(self, mock_fs, debug_options):
        """Test nested trees resolve to the innermost one."""
        mock_fs.mkdir("/src/out/debug-x64")
        mock_fs.mkdir("/src/fuchsia/out/debug-x64")
        env = MappingEnvironment(cwd="/src/fuchsia/garnet")

        assert fuchsia_root(debug_options, env, mock_fs) == Path("/src/fuchsia")

    def test_release_selects_release_out_dir(self, mock_fs, release_options):
        """Test release options ignore a debug-only tree."""
        mock_fs.mkdir("/src/inner/out/debug-x64")
        mock_fs.mkdir("/src/out/release-x64")
        env = MappingEnvironment(cwd="/src/inner/lib")

        assert fuchsia_root(release_options, env, mock_fs) == Path("/src")

    def test_filesystem_root_qualifies(self, mock_fs, debug_options):
        """Test the filesystem root itself is tested."""
        mock_fs.mkdir("/out/debug-x64")
        env = MappingEnvironment(cwd="/a/b")

        assert fuchsia_root(debug_options, env, mock_fs) == Path("/")

    def test_no_qualifying_ancestor(self, mock_fs, debug_options):
        """Test NotFoundError when the search reaches the filesystem root."""
        mock_fs.mkdir("/src/fuchsia/out/release-x64")
        env = MappingEnvironment(cwd="/src/fuchsia/garnet")

        with pytest.raises(NotFoundError, match="FUCHSIA_ROOT"):
            fuchsia_root(debug_options, env, mock_fs)

    def test_only_existence_is_checked(self, mock_fs, debug_options):
        """Test an empty build output directory is enough."""
        mock_fs.mkdir("/tree/out/debug-x64")
        env = MappingEnvironment(cwd="/tree")

        assert fuchsia_root(debug_options, env, mock_fs) == Path("/tree")
        assert mock_fs.queries == [Path("/tree/out/debug-x64")]


class TestRootOverride:
    """Tests for the FUCHSIA_ROOT override."""

    def test_override_is_trusted(self, mock_fs, debug_options):
        """Test the override needs no build output."""
        mock_fs.mkdir("/opt/fuchsia")
        env = MappingEnvironment({"FUCHSIA_ROOT": "/opt/fuchsia"}, cwd="/elsewhere")

        assert fuchsia_root(debug_options, env, mock_fs) == Path("/opt/fuchsia")

    def test_override_not_a_directory(self, mock_fs, debug_options):
        """Test a bad override fails even when an ancestor would qualify."""
        mock_fs.mkdir("/src/fuchsia/out/debug-x64")
        env = MappingEnvironment(
            {"FUCHSIA_ROOT": "/missing"}, cwd="/src/fuchsia/garnet"
        )

        with pytest.raises(ConfigurationError, match="/missing"):
            fuchsia_root(debug_options, env, mock_fs)

    def test_override_to_file(self, tmp_path, debug_options):
        """Test an override naming a regular file is rejected."""
        not_a_dir = tmp_path / "fuchsia"
        not_a_dir.write_text("")
        env = MappingEnvironment({"FUCHSIA_ROOT": str(not_a_dir)}, cwd=tmp_path)

        with pytest.raises(ConfigurationError):
            fuchsia_root(debug_options, env)


    def test_empty_override(self, mock_fs, debug_options):
        """Test an empty override is rejected instead of meaning '.'."""
        mock_fs.mkdir("/src/fuchsia/out/debug-x64")
        env = MappingEnvironment({"FUCHSIA_ROOT": ""}, cwd="/src/fuchsia")

        with pytest.raises(ConfigurationError, match="empty"):
            fuchsia_root(debug_options, env, mock_fs)

    def test_relative_override_uses_working_directory(self, mock_fs, debug_options):
        """Test a relative override is anchored at the provider's cwd."""
        mock_fs.mkdir("/work/tree")
        env = MappingEnvironment({"FUCHSIA_ROOT": "tree"}, cwd="/work")

        root = fuchsia_root(debug_options, env, mock_fs)

        assert root.is_absolute()
        assert root == Path("/work/tree")

    def test_relative_override_on_disk(self, tmp_path, debug_options):
        """Test a relative override resolves against cwd, not the process cwd."""
        (tmp_path / "tree").mkdir()
        env = MappingEnvironment({"FUCHSIA_ROOT": "tree"}, cwd=tmp_path)

        assert fuchsia_root(debug_options, env) == tmp_path / "tree"


class TestPossibleTargetOutDir:
    """Tests for possible_target_out_dir()."""

    def test_existing(self, mock_fs, debug_options):
        mock_fs.mkdir("/f/out/debug-x64")

        result = possible_target_out_dir(Path("/f"), debug_options, mock_fs)

        assert result == Path("/f/out/debug-x64")

    def test_missing(self, mock_fs, release_options):
        mock_fs.mkdir("/f/out/debug-x64")

        with pytest.raises(NotFoundError):
            possible_target_out_dir(Path("/f"), release_options, mock_fs)


class TestRealFilesystem:
    """Tests against a tree on disk."""

    def test_search_on_disk(self, fuchsia_tree, tree_env, debug_options):
        assert fuchsia_root(debug_options, tree_env) == fuchsia_tree

    def test_search_on_disk_without_build(self, fuchsia_tree, tree_env):
        with pytest.raises(NotFoundError):
            fuchsia_root(TargetOptions.new(True), tree_env)
