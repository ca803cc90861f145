"""ディレクトリ展開のユニットテスト。"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from requirecodeowners.models.errors import ExpansionError
from requirecodeowners.validators.expander import (
    dirs_at_level,
    expand,
    glob_directories,
    has_wildcard,
    normalize,
)


@pytest.fixture
def nested(make_tree: Callable[..., Path]) -> Path:
    # a/{b/{c,d}, e}, a/file.txt
    return make_tree(dirs=["a/b/c", "a/b/d", "a/e"], files=["a/file.txt", "a/b/c/inner.txt"])


class TestHasWildcard:
    @pytest.mark.parametrize("path", ["apps/*/services", "src/?", "pkg/[ab]"])
    def test_wildcard_paths(self, path: str) -> None:
        assert has_wildcard(path) is True

    def test_literal_path(self) -> None:
        assert has_wildcard("apps/web/services") is False


class TestNormalize:
    def test_removes_redundant_segments(self) -> None:
        assert normalize("./src//pkg/./") == "src/pkg"

    def test_keeps_parent_segments_lexical(self) -> None:
        assert normalize("src/../pkg") == "pkg"


class TestDirsAtLevel:
    def test_level_zero_returns_dir_itself(self, nested: Path) -> None:
        assert dirs_at_level(nested, "a", 0) == ["a"]

    def test_level_zero_keeps_path_as_written(self, nested: Path) -> None:
        assert dirs_at_level(nested, "./a/", 0) == ["./a/"]

    def test_descent_normalizes_path(self, nested: Path) -> None:
        assert set(dirs_at_level(nested, "./a/", 1)) == {"a/b", "a/e"}

    def test_level_one_returns_immediate_subdirs(self, nested: Path) -> None:
        assert set(dirs_at_level(nested, "a", 1)) == {"a/b", "a/e"}

    def test_level_two_returns_nested_subdirs(self, nested: Path) -> None:
        assert set(dirs_at_level(nested, "a", 2)) == {"a/b/c", "a/b/d"}

    def test_level_beyond_depth_is_empty(self, nested: Path) -> None:
        assert dirs_at_level(nested, "a", 4) == []

    def test_negative_level_returns_dir_itself(self, nested: Path) -> None:
        assert dirs_at_level(nested, "a", -1) == ["a"]

    def test_empty_directory(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree(dirs=["empty"])
        assert dirs_at_level(root, "empty", 1) == []

    def test_files_are_ignored(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree(dirs=["only-files"], files=["only-files/a.txt", "only-files/b.txt"])
        assert dirs_at_level(root, "only-files", 1) == []

    def test_missing_directory_raises_expansion_error(self, tmp_path: Path) -> None:
        with pytest.raises(ExpansionError) as exc_info:
            dirs_at_level(tmp_path, "missing", 1)
        assert exc_info.value.path == "missing"

    def test_symlinked_directory_is_not_followed(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree(dirs=["real/inside", "tree/child"])
        os.symlink(root / "real", root / "tree" / "link")
        assert dirs_at_level(root, "tree", 1) == ["tree/child"]

    def test_deep_tree_does_not_recurse(self, tmp_path: Path) -> None:
        deep = tmp_path / "deep"
        current = deep
        for i in range(50):
            current = current / f"d{i}"
        current.mkdir(parents=True)
        result = dirs_at_level(tmp_path, "deep", 50)
        assert len(result) == 1
        assert result[0].endswith("/d49")


class TestGlobDirectories:
    def test_matches_only_directories(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree(dirs=["apps/a/services", "apps/b/services"], files=["apps/c/services"])
        assert glob_directories(root, "apps/*/services") == ["apps/a/services", "apps/b/services"]

    def test_no_match(self, tmp_path: Path) -> None:
        assert glob_directories(tmp_path, "nonexistent/*/path") == []

    def test_absolute_pattern(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree(dirs=["apps/a", "apps/b"], files=["apps/c"])
        pattern = f"{root.as_posix()}/apps/*"
        assert glob_directories(Path("."), pattern) == [f"{root.as_posix()}/apps/a", f"{root.as_posix()}/apps/b"]

    def test_double_star_matches_single_segment(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree(dirs=["apps/x/y/z"])
        assert glob_directories(root, "apps/**") == ["apps/x"]

    def test_hidden_directories_match(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree(dirs=["apps/.hidden", "apps/visible"])
        assert glob_directories(root, "apps/*") == ["apps/.hidden", "apps/visible"]


class TestExpand:
    def test_literal_path_level_zero(self, nested: Path) -> None:
        assert expand(nested, "a", 0) == ["a"]

    def test_glob_with_level(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree(dirs=["apps/a/services/foo", "apps/a/services/bar", "apps/b/services/baz"])
        assert set(expand(root, "apps/*/services", 1)) == {
            "apps/a/services/foo",
            "apps/a/services/bar",
            "apps/b/services/baz",
        }

    def test_glob_without_matches_is_empty(self, tmp_path: Path) -> None:
        assert expand(tmp_path, "apps/*/services", 1) == []
