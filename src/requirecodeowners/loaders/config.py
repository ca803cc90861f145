"""設定ファイル(.requirecodeowners.yml)の読み込み。"""

from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from requirecodeowners.logging_config import get_logger
from requirecodeowners.models.config import RequireCodeownersConfig
from requirecodeowners.models.errors import ConfigError

logger = get_logger(__name__)


def load_config(config_path: Path) -> RequireCodeownersConfig:
    """設定ファイルを読み込み、検証する。

    Raises:
        ConfigError: ファイルが読めない、YAMLとして不正、または値が不正な場合。
    """
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"reading config file {config_path}: {e.strerror or e}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"parsing config file: {e}") from None

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("parsing config file: top level must be a mapping")

    raw_dirs = data.get("directories") or []
    if not isinstance(raw_dirs, list):
        raise ConfigError("parsing config file: directories must be a list")

    # pydanticのエラーより分かりやすいメッセージを先に出す
    for i, entry in enumerate(raw_dirs):
        if not isinstance(entry, dict):
            raise ConfigError(f"directory at index {i} must be a mapping")
        if not entry.get("path"):
            raise ConfigError(f"directory at index {i} has no path")
        level = entry.get("level", 0)
        if isinstance(level, int) and level < 0:
            raise ConfigError(f"directory {entry['path']} has invalid level {level} (must be >= 0)")

    try:
        config = RequireCodeownersConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"parsing config file: {e}") from None

    logger.debug("config_loaded", path=str(config_path), directories=len(config.directories))
    return config
