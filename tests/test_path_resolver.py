"""
Tests for search path resolution
"""

import os
import pytest

from tinysh.errors import ResolverError
from tinysh.path_resolver import find_which_path, list_executables


class TestFindWhichPath:
    def test_finds_entry(self, bin_dir, make_script):
        script = make_script("hello", "echo hello")
        assert find_which_path([str(bin_dir)], "hello") == str(script)

    def test_first_directory_wins(self, tmp_path, make_script):
        first, second = tmp_path / "first", tmp_path / "second"
        first.mkdir()
        second.mkdir()
        make_script("tool", "true", directory=second)
        expected = make_script("tool", "true", directory=first)
        assert find_which_path([str(first), str(second)], "tool") == str(expected)

    def test_missing_directories_are_skipped(self, tmp_path, bin_dir, make_script):
        script = make_script("tool", "true")
        search_path = [str(tmp_path / "nope"), "", str(bin_dir)]
        assert find_which_path(search_path, "tool") == str(script)

    def test_not_found(self, bin_dir):
        assert find_which_path([str(bin_dir)], "nonexistent_cmd_xyz") is None
        assert find_which_path([], "ls") is None

    def test_matches_any_entry_type(self, bin_dir):
        (bin_dir / "plain.txt").write_text("not executable")
        (bin_dir / "subdir").mkdir()
        assert find_which_path([str(bin_dir)], "plain.txt") == str(bin_dir / "plain.txt")
        assert find_which_path([str(bin_dir)], "subdir") == str(bin_dir / "subdir")

    def test_exact_name_only(self, bin_dir, make_script):
        make_script("tool", "true")
        assert find_which_path([str(bin_dir)], "too") is None
        assert find_which_path([str(bin_dir)], "TOOL") is None

    def test_unlistable_directory_is_an_error(self, tmp_path):
        not_a_dir = tmp_path / "file"
        not_a_dir.write_text("")
        with pytest.raises(ResolverError) as exc_info:
            find_which_path([str(not_a_dir)], "tool")
        assert str(not_a_dir) in exc_info.value.message


class TestListExecutables:
    def test_only_executable_files(self, bin_dir, make_script):
        make_script("runme", "true")
        (bin_dir / "data.txt").write_text("")
        (bin_dir / "subdir").mkdir()
        assert list_executables([str(bin_dir)]) == {"runme"}

    def test_ignores_unreadable_entries(self, tmp_path, bin_dir, make_script):
        make_script("runme", "true")
        names = list_executables([str(tmp_path / "nope"), str(bin_dir)])
        assert names == {"runme"}
