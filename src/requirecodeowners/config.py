"""requirecodeownersの実行設定。"""

from pathlib import Path

from pydantic_settings import BaseSettings

from requirecodeowners.models.config import DEFAULT_CONFIG_FILE


class Settings(BaseSettings):
    """実行設定。環境変数から読み込み可能。CLIオプションが優先される。"""

    model_config = {"env_prefix": "REQUIRECODEOWNERS_"}

    root: Path = Path(".")
    # 未指定の場合は root/.requirecodeowners.yml
    config_path: Path | None = None
    # 未指定の場合は標準の配置場所から自動検出
    codeowners_path: Path | None = None
    log_level: str = "WARNING"

    def resolved_config_path(self) -> Path:
        if self.config_path is not None:
            return self.config_path
        return self.root / DEFAULT_CONFIG_FILE
