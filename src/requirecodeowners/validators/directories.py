"""ディレクトリ指定に基づくCODEOWNERSカバレッジ検証ロジック。"""

import stat
from collections.abc import Sequence
from pathlib import Path

from requirecodeowners.logging_config import get_logger
from requirecodeowners.models.config import DEFAULT_CONFIG_FILE, DirectorySpec
from requirecodeowners.models.errors import ExpansionError
from requirecodeowners.models.ruleset import Ruleset
from requirecodeowners.models.validation import ErrorReason, ValidationError, sort_errors
from requirecodeowners.validators.coverage import has_coverage
from requirecodeowners.validators.expander import expand_bases, has_wildcard, normalize, resolve_bases

logger = get_logger(__name__)


class DirectoryValidator:
    """ディレクトリ指定の一覧をルールセットに照らして検証する。

    最初のエラーで中断せず、全ての指定について検出したエラーを蓄積する。
    """

    def __init__(self, ruleset: Ruleset, root: Path | None = None, config_name: str = DEFAULT_CONFIG_FILE) -> None:
        self._ruleset = ruleset
        self._root = root if root is not None else Path(".")
        self._config_name = config_name

    def validate(self, specs: Sequence[DirectorySpec]) -> list[ValidationError]:
        """全てのディレクトリ指定を検証する。

        Args:
            specs: 検証対象のディレクトリ指定。

        Returns:
            パス順に並べ替えたエラーのリスト。問題がない場合は空リスト。
        """
        errors: list[ValidationError] = []
        for spec in specs:
            errors.extend(self._validate_spec(spec))

        logger.info("validation_finished", specs=len(specs), errors=len(errors))
        return sort_errors(errors)

    def _validate_spec(self, spec: DirectorySpec) -> list[ValidationError]:
        """単一のディレクトリ指定を検証する。"""
        if has_wildcard(spec.path):
            # 存在確認はglob展開で代替する
            bases = resolve_bases(self._root, spec.path)
            if not bases:
                return [self._no_match_error(spec)]
        else:
            stat_error = self._check_base(spec.path)
            if stat_error is not None:
                return [stat_error]
            bases = [spec.path]

        logger.debug("validating_spec", path=spec.path, level=spec.level, bases=bases)
        try:
            dirs = expand_bases(self._root, bases, spec.level)
        except ExpansionError as e:
            return [
                ValidationError(
                    path=e.path,
                    reason=ErrorReason.EXPANSION_FAILURE,
                    message=f"error reading: {e}",
                )
            ]

        if spec.level > 0 and not dirs:
            return [
                ValidationError(
                    path=spec.path,
                    reason=ErrorReason.NO_SUBDIRECTORIES_AT_LEVEL,
                    message=(
                        f"no subdirectories at level {spec.level}. Create subdirectories or set level: 0"
                    ),
                )
            ]

        return [
            ValidationError(
                path=d,
                reason=ErrorReason.NOT_COVERED,
                message=f"missing CODEOWNERS entry. Add to CODEOWNERS: /{normalize(d)}/ @owner",
            )
            for d in dirs
            if not has_coverage(self._ruleset, d)
        ]

    def _check_base(self, path: str) -> ValidationError | None:
        """ワイルドカードを含まないパスの存在と種別を確認する。"""
        try:
            info = (self._root / normalize(path)).stat()
        except FileNotFoundError:
            return ValidationError(
                path=path,
                reason=ErrorReason.NOT_FOUND,
                message=f"directory does not exist. Create it or remove from {self._config_name}",
            )
        except OSError as e:
            return ValidationError(
                path=path,
                reason=ErrorReason.STAT_FAILURE,
                message=f"error: {e.strerror or e}",
            )

        if not stat.S_ISDIR(info.st_mode):
            return ValidationError(
                path=path,
                reason=ErrorReason.NOT_A_DIRECTORY,
                message=f"path is a file, not a directory. Update {self._config_name}",
            )
        return None

    def _no_match_error(self, spec: DirectorySpec) -> ValidationError:
        return ValidationError(
            path=spec.path,
            reason=ErrorReason.NOT_FOUND,
            message=f"no directories match pattern. Fix the pattern or remove from {self._config_name}",
        )
