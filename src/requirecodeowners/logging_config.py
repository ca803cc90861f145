"""structlogによるロギング設定。"""

import logging
import sys

import structlog


def _configure_structlog(cache_logger_on_first_use: bool) -> None:
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


def configure_logging(level: str = "WARNING") -> None:
    """ログ出力を設定する。

    標準出力はMarkdownレポート用に空けておくため、ログは標準エラーへ出力する。
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )
    _configure_structlog(cache_logger_on_first_use=True)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """モジュール用のロガーを返す。

    configure_logging前でも標準ログ経由にしておき、ライブラリとして使われた場合に
    debug/infoイベントが標準出力へ出ないようにする。
    """
    if not structlog.is_configured():
        _configure_structlog(cache_logger_on_first_use=False)
    return structlog.get_logger(name)
