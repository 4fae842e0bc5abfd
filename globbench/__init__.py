"""
globbench: ファイルシステム glob の実行時間を計測する小さなハーネス.

Example:
    >>> from globbench import DEFAULT_CASES, get_method, run_cases
    >>> run_cases("/path/to/swift", DEFAULT_CASES, get_method("glob"))
    python,basic,stdlib/public/*/*.swift,120,1.532
"""

from .benchmark import (
    DEFAULT_CASES,
    BenchmarkCase,
    CaseResult,
    GlobMethod,
    format_result_line,
    get_method,
    run_case,
    run_cases,
)
from .config import BenchConfig
from .logging import LoggerManager

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CASES",
    "BenchConfig",
    "BenchmarkCase",
    "CaseResult",
    "GlobMethod",
    "LoggerManager",
    "format_result_line",
    "get_method",
    "run_case",
    "run_cases",
]
