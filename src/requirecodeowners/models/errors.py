"""requirecodeownersのカスタム例外クラス。"""


class RequireCodeownersError(Exception):
    """requirecodeownersの基底例外クラス。"""


class ConfigError(RequireCodeownersError):
    """設定ファイルの読み込み・検証エラー。"""


class CodeownersNotFoundError(RequireCodeownersError):
    """CODEOWNERSファイルが見つからない場合の例外。"""

    def __init__(self, message: str = "CODEOWNERS not found in standard locations (.github/, root, docs/)") -> None:
        super().__init__(message)


class ExpansionError(RequireCodeownersError):
    """ディレクトリ展開中にファイルシステムの読み込みに失敗した場合の例外。"""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"reading directory {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause
