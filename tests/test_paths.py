"""Tests for the pure path helpers (core/paths.py)."""

from __future__ import annotations

import pytest

from zkcli.core.paths import (
    ancestor_paths,
    join_path,
    join_relative,
    parent_path,
    split_path,
    validate_path,
)
from zkcli.exceptions import InvalidPathError


class TestValidatePath:
    @pytest.mark.parametrize("path", ["/", "/a", "/a/b/c", "/zookeeper/quota"])
    def test_valid_paths_returned_unchanged(self, path: str) -> None:
        assert validate_path(path) == path

    @pytest.mark.parametrize(
        "path",
        ["", "a/b", "/a/", "/a//b", "//"],
    )
    def test_invalid_paths_rejected(self, path: str) -> None:
        with pytest.raises(InvalidPathError):
            validate_path(path)

    def test_error_carries_path(self) -> None:
        with pytest.raises(InvalidPathError) as exc_info:
            validate_path("/a/")
        assert exc_info.value.path == "/a/"
        assert "must not end with '/'" in str(exc_info.value)

    def test_relative_path_has_hint(self) -> None:
        with pytest.raises(InvalidPathError) as exc_info:
            validate_path("config")
        assert exc_info.value.hint is not None


class TestSplitJoin:
    def test_split_root_is_empty(self) -> None:
        assert split_path("/") == ()

    def test_split_nested(self) -> None:
        assert split_path("/a/b/c") == ("a", "b", "c")

    def test_join_under_root(self) -> None:
        assert join_path("/", "a") == "/a"

    def test_join_nested(self) -> None:
        assert join_path("/a/b", "c") == "/a/b/c"

    def test_join_relative_empty_prefix(self) -> None:
        assert join_relative("", "a") == "a"

    def test_join_relative_nested(self) -> None:
        assert join_relative("a/b", "c") == "a/b/c"

    @pytest.mark.parametrize(
        ("path", "expected"),
        [("/a", "/"), ("/a/b", "/a"), ("/a/b/c", "/a/b"), ("/", "/")],
    )
    def test_parent_path(self, path: str, expected: str) -> None:
        assert parent_path(path) == expected


class TestAncestorPaths:
    def test_top_down_excluding_target(self) -> None:
        assert ancestor_paths("/a/b/c") == ["/a", "/a/b"]

    def test_top_level_node_has_no_ancestors(self) -> None:
        assert ancestor_paths("/a") == []

    def test_root_has_no_ancestors(self) -> None:
        assert ancestor_paths("/") == []
