"""structlog ベースのロガー設定

ライブラリ内部は logging.getLogger(__name__) で出力する。アプリケーションが
new_logger() を呼んだ場合のみ、それらのレコードを structlog で整形する。
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from .config import LogSection

_HANDLER_NAME = "fluent_validation"


def new_logger(
    level: str = "INFO",
    format: str = "json",
    stream: TextIO | None = None,
) -> structlog.stdlib.BoundLogger:
    """ルートロガーに structlog 整形のハンドラを設定し、ロガーを返す。

    Validator はルール失敗を DEBUG (field, rule)、raise_if_invalid() による
    送出を INFO (error_count) で出力する。入力値は出力しない。
    複数回呼んだ場合、以前に追加したハンドラは置き換えられる。

    Args:
        level: ログレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: 出力形式 ("json" or "text")
        stream: 出力先。省略時は標準出力

    Returns:
        設定済みの structlog.stdlib.BoundLogger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: structlog.types.Processor
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # logging.getLogger 経由のレコードは extra を構造化フィールドに変換する
        foreign_pre_chain=[*shared_processors, structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return structlog.stdlib.get_logger("fluent_validation")


def new_logger_from_config(
    section: LogSection, stream: TextIO | None = None
) -> structlog.stdlib.BoundLogger:
    """LogSection から structlog ロガーを構築する。"""
    return new_logger(level=section.level, format=section.format, stream=stream)
