"""globbench.benchmark: glob 計測の中核処理."""

from .cases import DEFAULT_CASES
from .methods import DEFAULT_METHOD, available_methods, get_method
from .models import BenchmarkCase, CaseResult, GlobMethod
from .runner import format_result_line, run_case, run_cases

__all__ = [
    "DEFAULT_CASES",
    "DEFAULT_METHOD",
    "BenchmarkCase",
    "CaseResult",
    "GlobMethod",
    "available_methods",
    "format_result_line",
    "get_method",
    "run_case",
    "run_cases",
]
