"""
LoggerManagerのテスト
"""

import logging

import colorlog

from globbench.benchmark.utils import LOGGER_NAME, configure_logger
from globbench.logging import LoggerManager, LogLevel
from globbench.logging.logger_manager import LevelBasedFormatter


class TestLoggerManager:
    """LoggerManagerクラスのテスト"""

    def test_singleton_pattern(self):
        """シングルトンパターンの動作テスト"""
        assert LoggerManager() is LoggerManager()

    def test_get_logger_basic(self):
        """stderr 向けの colorlog ハンドラーを1つだけ持つロガーが作られる"""
        logger = LoggerManager().get_logger("test_logger")

        assert logger.name == "test_logger"
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], colorlog.StreamHandler)
        assert isinstance(logger.handlers[0].formatter, LevelBasedFormatter)

    def test_logger_reuse(self):
        """同じ名前のロガーが再利用され, ハンドラーが重複しない"""
        manager = LoggerManager()
        first = manager.get_logger("reuse_test")
        second = manager.get_logger("reuse_test")

        assert first is second
        assert len(second.handlers) == 1

    def test_configure_updates_existing_loggers(self):
        """configure で既存ロガーのレベルと形式が切り替わる"""
        manager = LoggerManager()
        logger = manager.get_logger("format_test")
        formatter = logger.handlers[0].formatter
        assert isinstance(formatter, LevelBasedFormatter)
        assert formatter.use_debug_format is False

        manager.configure(LogLevel.DEBUG)
        assert logger.level == logging.DEBUG
        assert formatter.use_debug_format is True

        manager.configure(LogLevel.INFO)
        assert logger.level == logging.INFO
        assert formatter.use_debug_format is False

    def test_configure_applies_to_new_loggers(self):
        """configure 後に作られるロガーも同じレベルになる"""
        manager = LoggerManager()
        manager.configure(LogLevel.DEBUG)

        logger = manager.get_logger("late_logger")

        assert logger.level == logging.DEBUG
        assert logger.handlers[0].formatter.use_debug_format is True

    def test_debug_format_includes_location(self):
        """DEBUG 形式はファイル名と行番号を含む"""
        formatter = LevelBasedFormatter(use_debug_format=True)
        record = logging.LogRecord(
            "x", logging.DEBUG, "/src/runner.py", 42, "計測開始", None, None
        )

        output = formatter.format(record)

        assert "runner.py" in output
        assert "042" in output
        assert "計測開始" in output

    def test_reset_functionality(self):
        """resetでハンドラーと伝播設定が元に戻る"""
        manager1 = LoggerManager()
        logger = manager1.get_logger("reset_test")

        LoggerManager.reset()

        assert LoggerManager() is not manager1
        assert logger.handlers == []
        assert logger.propagate is True
        assert logger.level == logging.NOTSET

    def test_log_output_goes_to_stderr(self, capsys):
        """ログは標準エラーへ出力される"""
        logger = LoggerManager().get_logger("output_test")

        logger.info("情報メッセージ")

        captured = capsys.readouterr()
        assert "情報メッセージ" in captured.err
        assert captured.out == ""


class TestConfigureLogger:
    """configure_logger のテスト."""

    def test_info_level(self):
        """通常時は INFO."""
        logger = configure_logger(debug=False)
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO

    def test_debug_level(self):
        """--debug 時は DEBUG."""
        logger = configure_logger(debug=True)
        assert logger.level == logging.DEBUG

    def test_reconfigure(self):
        """再設定でレベルが更新され, ハンドラーは増えない."""
        configure_logger(debug=True)
        logger = configure_logger(debug=False)

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
