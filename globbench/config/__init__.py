"""globbench.config: 型付き設定のエントリーポイント."""

from .bench_config import BenchConfig

__all__ = ["BenchConfig"]
