"""ディレクトリ指定(パス + level)を検証対象ディレクトリ群へ展開する。"""

import glob
import os
import posixpath
from pathlib import Path

from requirecodeowners.logging_config import get_logger
from requirecodeowners.models.errors import ExpansionError

logger = get_logger(__name__)

_WILDCARD_CHARS = frozenset("*?[")


def has_wildcard(path: str) -> bool:
    """パスにglobのワイルドカード文字が含まれるかを判定する。"""
    return any(c in _WILDCARD_CHARS for c in path)


def normalize(path: str) -> str:
    """冗長な区切り文字や`.`セグメントを除去する。シンボリックリンクは解決しない。"""
    return posixpath.normpath(path.replace(os.sep, "/"))


def glob_directories(root: Path, pattern: str) -> list[str]:
    """globパターンにマッチするディレクトリを返す。

    ワイルドカードは1セグメント内でのみマッチし、`**`も`*`と同じく再帰しない。
    相対パターンはrootからの相対パス、絶対パターンは絶対パスで返す。
    ディレクトリ以外にマッチしたパスはエラーにせず除外する。
    """
    matches: list[str] = []
    for match in glob.glob(normalize(pattern), root_dir=root, recursive=False, include_hidden=True):
        if (root / match).is_dir():
            matches.append(normalize(match))
    return sorted(matches)


def dirs_at_level(root: Path, path: str, level: int) -> list[str]:
    """pathからlevel階層下にあるディレクトリを返す。

    level <= 0 の場合はpath自身を返す。ファイルはどの階層でも無視する。
    シンボリックリンクされたディレクトリは辿らない。

    Raises:
        ExpansionError: ディレクトリ一覧の取得に失敗した場合。
    """
    if level <= 0:
        return [path]

    path = normalize(path)

    results: list[str] = []
    stack: list[tuple[str, int]] = [(path, level)]
    while stack:
        current, remaining = stack.pop()
        if remaining == 0:
            results.append(current)
            continue
        try:
            with os.scandir(root / current) as it:
                names = sorted(entry.name for entry in it if entry.is_dir(follow_symlinks=False))
        except OSError as e:
            raise ExpansionError(current, e) from e
        # 逆順に積んで名前順に取り出す
        for name in reversed(names):
            stack.append((posixpath.join(current, name), remaining - 1))

    logger.debug("expanded_directory", path=path, level=level, count=len(results))
    return results


def resolve_bases(root: Path, path: str) -> list[str]:
    """展開の起点となるディレクトリを返す。

    ワイルドカードを含むパスはglobで展開する。含まないパスは存在確認済みであることを前提とする。
    """
    if has_wildcard(path):
        return glob_directories(root, path)
    return [path]


def expand_bases(root: Path, bases: list[str], level: int) -> list[str]:
    """各起点ディレクトリをlevel階層分展開した結果を連結して返す。"""
    results: list[str] = []
    for base in bases:
        results.extend(dirs_at_level(root, base, level))
    return results


def expand(root: Path, path: str, level: int) -> list[str]:
    """ディレクトリ指定を具体的なディレクトリの一覧に展開する。

    Args:
        root: リポジトリのルートディレクトリ。
        path: rootからの相対パス。globワイルドカードを含んでもよい。
        level: 展開する階層数。

    Returns:
        rootからの相対パスの一覧。該当なしの場合は空リスト。

    Raises:
        ExpansionError: ディレクトリ一覧の取得に失敗した場合。
    """
    return expand_bases(root, resolve_bases(root, path), level)
