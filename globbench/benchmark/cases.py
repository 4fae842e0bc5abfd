"""計測に使う固定ケース表.

順序がそのまま出力行の順序になる.
"""

from typing import Tuple

from globbench.benchmark.models import BenchmarkCase

DEFAULT_CASES: Tuple[BenchmarkCase, ...] = (
    BenchmarkCase(name="basic", pattern="stdlib/public/*/*.swift"),
    BenchmarkCase(name="intermediate", pattern="lib/SILOptimizer/*/*.cpp"),
    BenchmarkCase(name="advanced", pattern="lib/*/[A-Z]*.cpp"),
)
