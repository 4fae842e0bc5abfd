"""
globbench.logging.logger_manager: ログ管理マネージャー.

colorlogを使用したログ管理. 出力先は標準エラーのみで, 計測結果を出す標準出力には書き込まない.
"""

import logging
from enum import Enum
from typing import Dict, Optional

import colorlog

_INFO_FORMAT = "%(asctime)s|%(log_color)s%(levelname)-5.5s%(reset)s| %(message)s"
_DEBUG_FORMAT = (
    "%(asctime)s|%(log_color)s%(levelname)-5.5s%(reset)s|"
    "%(filename)-18s|%(lineno)03d| %(message)s"
)
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LOG_COLORS = {"DEBUG": "cyan", "INFO": "green"}


class LogLevel(Enum):
    """計測ハーネスで使うログレベル."""

    DEBUG = "DEBUG"
    INFO = "INFO"


class LevelBasedFormatter(logging.Formatter):
    """DEBUG 時のみファイル名・行番号付きの形式へ切り替わるフォーマッター."""

    def __init__(self, use_debug_format: bool = False) -> None:
        """ログ整形の初期化."""
        super().__init__(datefmt=_DATE_FORMAT)
        self.use_debug_format = use_debug_format
        self._info_formatter = colorlog.ColoredFormatter(
            _INFO_FORMAT, datefmt=_DATE_FORMAT, log_colors=_LOG_COLORS
        )
        self._debug_formatter = colorlog.ColoredFormatter(
            _DEBUG_FORMAT, datefmt=_DATE_FORMAT, log_colors=_LOG_COLORS
        )

    def format(self, record: logging.LogRecord) -> str:
        """ログレコードを整形."""
        if self.use_debug_format:
            return str(self._debug_formatter.format(record))
        return str(self._info_formatter.format(record))


class LoggerManager:
    """
    ログ管理マネージャークラス.

    プロセス全体で一つのインスタンスを共有し, 同名ロガーへの
    ハンドラー重複登録を防ぐ. CLI から繰り返し呼ばれても
    レベルと形式だけを更新する.

    Attributes:
        _loggers (Dict[str, logging.Logger]): 管理されているロガーの辞書
        _level (LogLevel): 現在のログレベル
    """

    _instance: Optional["LoggerManager"] = None
    _loggers: Dict[str, logging.Logger] = {}

    def __new__(cls) -> "LoggerManager":
        """シングルトンパターンの実装."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """LoggerManagerを初期化."""
        if hasattr(self, "_initialized"):
            return
        self._level = LogLevel.INFO
        self._initialized = True

    def get_logger(self, name: str) -> logging.Logger:
        """
        指定された名前のロガーを取得または作成.

        Args:
            name (str): ロガー名

        Returns:
            logging.Logger: 現在のレベルで設定されたロガー
        """
        if name not in self._loggers:
            logger = logging.getLogger(name)
            handler = colorlog.StreamHandler()
            handler.setFormatter(LevelBasedFormatter())
            logger.addHandler(handler)
            logger.propagate = False
            self._loggers[name] = logger
            self._apply(logger)
        return self._loggers[name]

    def configure(self, level: LogLevel) -> None:
        """
        管理中の全ロガーのレベルと形式を切り替える.

        Args:
            level (LogLevel): 新しいログレベル
        """
        self._level = level
        for logger in self._loggers.values():
            self._apply(logger)

    def _apply(self, logger: logging.Logger) -> None:
        logger.setLevel(getattr(logging, self._level.value))
        for handler in logger.handlers:
            if isinstance(handler.formatter, LevelBasedFormatter):
                handler.formatter.use_debug_format = self._level == LogLevel.DEBUG

    @classmethod
    def reset(cls) -> None:
        """シングルトンインスタンスをリセット（主にテスト用）."""
        for logger in cls._loggers.values():
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
            logger.propagate = True
        cls._instance = None
        cls._loggers.clear()
