"""CODEOWNERSファイルの検出と読み込み。"""

from collections.abc import Sequence
from pathlib import Path

from codeowners import CodeOwners

from requirecodeowners.logging_config import get_logger
from requirecodeowners.models.errors import CodeownersNotFoundError, ConfigError

logger = get_logger(__name__)

# GitHubが参照する順序
CODEOWNERS_LOCATIONS: tuple[str, ...] = (
    ".github/CODEOWNERS",
    "CODEOWNERS",
    "docs/CODEOWNERS",
)


class CodeownersRuleset:
    """codeownersライブラリをRulesetインターフェースに適合させるアダプター。

    codeownersライブラリはマッチなしと所有者なしのルールを区別しないため、
    どちらの場合も空リストを返す。
    """

    def __init__(self, content: str) -> None:
        self._owners = CodeOwners(content)

    def match(self, path: str) -> Sequence[str] | None:
        return [name for _, name in self._owners.of(path)]


def find_codeowners(root: Path) -> Path:
    """標準の配置場所からCODEOWNERSファイルを探す。

    Raises:
        CodeownersNotFoundError: どこにも見つからない場合。
    """
    for location in CODEOWNERS_LOCATIONS:
        candidate = root / location
        if candidate.is_file():
            return candidate
    raise CodeownersNotFoundError()


def load_ruleset(codeowners_path: Path | None, root: Path) -> CodeownersRuleset:
    """CODEOWNERSファイルを読み込んでルールセットを構築する。

    Args:
        codeowners_path: CODEOWNERSファイルのパス。Noneの場合はroot配下から自動検出する。
        root: リポジトリのルートディレクトリ。

    Raises:
        CodeownersNotFoundError: 自動検出で見つからない場合。
        ConfigError: 指定されたファイルが読めない場合。
    """
    path = codeowners_path if codeowners_path is not None else find_codeowners(root)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"opening {path}: {e.strerror or e}") from None

    logger.debug("codeowners_loaded", path=str(path))
    return CodeownersRuleset(content)
