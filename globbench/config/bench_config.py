"""globbench.config.bench_config: 実行設定の Pydantic モデル."""

from __future__ import annotations

import argparse
from typing import Literal

from pydantic import BaseModel, ConfigDict

from globbench.benchmark.methods import DEFAULT_METHOD, get_method
from globbench.benchmark.models import GlobMethod


class BenchConfig(BaseModel):
    """glob ベンチマークの実行設定.

    search_path は存在確認も空文字チェックも行わない. 空文字の場合,
    パターンはカレントディレクトリからの相対パスとして解決される.
    """

    model_config = ConfigDict(frozen=True)

    search_path: str
    method: Literal["glob", "iglob", "pathlib"] = DEFAULT_METHOD
    debug: bool = False

    @property
    def glob_method(self) -> GlobMethod:
        """設定された method に対応する glob 実装."""
        return get_method(self.method)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "BenchConfig":
        """CLI 引数から BenchConfig を生成. Pydantic バリデーションが自動実行される."""
        result: BenchConfig = cls.model_validate(
            {
                "search_path": args.search_path,
                "method": args.method,
                "debug": args.debug,
            }
        )
        return result
