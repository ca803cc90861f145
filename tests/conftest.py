"""テスト共通フィクスチャ。"""

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from requirecodeowners.loaders.codeowners import CodeownersRuleset


class FakeRuleset:
    """問い合わせパスと所有者の対応を直接指定するテスト用ルールセット。"""

    def __init__(self, rules: dict[str, list[str]]) -> None:
        self.rules = rules
        self.queries: list[str] = []

    def match(self, path: str) -> Sequence[str] | None:
        self.queries.append(path)
        return self.rules.get(path)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """tmp_path配下にディレクトリとファイルを作成するヘルパー。"""

    def _make_tree(dirs: Sequence[str] = (), files: Sequence[str] = ()) -> Path:
        for d in dirs:
            (tmp_path / d).mkdir(parents=True, exist_ok=True)
        for f in files:
            file_path = tmp_path / f
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text("test", encoding="utf-8")
        return tmp_path

    return _make_tree


@pytest.fixture
def write_codeowners(tmp_path: Path) -> Callable[[str], Path]:
    """tmp_path/.github/CODEOWNERSを書き込むヘルパー。"""

    def _write(content: str) -> Path:
        path = tmp_path / ".github" / "CODEOWNERS"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fake_ruleset() -> type[FakeRuleset]:
    """テスト用ルールセットのクラス。"""
    return FakeRuleset


@pytest.fixture
def ruleset_from() -> Callable[[str], CodeownersRuleset]:
    """CODEOWNERSの内容からルールセットを構築するヘルパー。"""
    return CodeownersRuleset
