"""ディレクトリのCODEOWNERSカバレッジ判定。"""

from requirecodeowners.logging_config import get_logger
from requirecodeowners.models.ruleset import Ruleset
from requirecodeowners.validators.expander import normalize

logger = get_logger(__name__)

# ディレクトリ配下の任意のファイルを表すダミーファイル名
_PROBE_FILENAME = "file.txt"


def probe_paths(directory: str) -> list[str]:
    """ルールの記法(末尾スラッシュ、`**`、非アンカー)に依存せず判定するための問い合わせパス。"""
    directory = normalize(directory)
    return [
        directory,
        f"{directory}/",
        f"{directory}/{_PROBE_FILENAME}",
    ]


def has_coverage(ruleset: Ruleset, directory: str) -> bool:
    """ディレクトリが所有者付きのルールでカバーされているかを判定する。

    所有者が空のルール（明示的な所有者なし）にマッチした場合はカバーされていないとみなす。
    """
    for probe in probe_paths(directory):
        owners = ruleset.match(probe)
        if owners:
            logger.debug("coverage_matched", directory=directory, probe=probe, owners=list(owners))
            return True
    return False
