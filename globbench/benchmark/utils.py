"""ベンチマーク実行の共通ユーティリティ."""

from __future__ import annotations

import logging

from globbench.logging import LoggerManager, LogLevel

LOGGER_NAME = "globbench.benchmark"
NS_PER_MS = 1_000_000


def configure_logger(debug: bool = False) -> logging.Logger:
    """ベンチマーク用ロガーを初期化して返す.

    Args:
        debug: デバッグログを有効化するかどうか.

    Returns:
        構成済みロガー.
    """
    manager = LoggerManager()
    manager.configure(LogLevel.DEBUG if debug else LogLevel.INFO)
    return manager.get_logger(LOGGER_NAME)


def ns_to_ms(elapsed_ns: int) -> float:
    """ナノ秒をミリ秒へ変換する."""
    return elapsed_ns / NS_PER_MS
