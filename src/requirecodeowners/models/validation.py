"""バリデーション結果のデータモデル。"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ErrorReason(StrEnum):
    """ディレクトリ検証の失敗理由。"""

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    NO_SUBDIRECTORIES_AT_LEVEL = "no_subdirectories_at_level"
    STAT_FAILURE = "stat_failure"
    EXPANSION_FAILURE = "expansion_failure"
    NOT_COVERED = "not_covered"


class ValidationError(BaseModel):
    """ディレクトリ単位の検証エラー。生成後は変更しない。"""

    model_config = ConfigDict(frozen=True)

    path: str
    reason: ErrorReason
    message: str


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """エラーをパスの昇順（大文字小文字を区別する序数比較）で並べ替える。"""
    return sorted(errors, key=lambda e: e.path)
