"""設定ファイル(.requirecodeowners.yml)のデータモデル。"""

from pydantic import BaseModel, Field

DEFAULT_CONFIG_FILE = ".requirecodeowners.yml"


class DirectorySpec(BaseModel):
    """検証対象ディレクトリの指定。

    levelは再帰展開の深さ。0はディレクトリ自身、N>0はN階層下のディレクトリ群を検証する。
    """

    path: str = Field(min_length=1)
    level: int = Field(default=0, ge=0)


class RequireCodeownersConfig(BaseModel):
    """設定ファイル全体。"""

    directories: list[DirectorySpec] = Field(default_factory=list)
