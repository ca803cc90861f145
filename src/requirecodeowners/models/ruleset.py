"""所有者ルールセットのインターフェース定義。"""

from collections.abc import Sequence
from typing import Protocol


class Ruleset(Protocol):
    """パスに対する所有者を問い合わせ可能なルールセット。

    マッチするルールがない場合はNoneを返す。
    所有者なしを明示するルールにマッチした場合は空のシーケンスを返す。
    """

    def match(self, path: str) -> Sequence[str] | None: ...
