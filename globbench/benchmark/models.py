"""ベンチマークケースと計測結果の型定義."""

from dataclasses import dataclass
from typing import Callable, List


@dataclass(frozen=True)
class BenchmarkCase:
    """ベンチマークケース. pattern は実行時に与えるベースパスからの相対パターン."""

    name: str
    pattern: str


@dataclass(frozen=True)
class CaseResult:
    """1ケース分の計測結果."""

    name: str
    pattern: str
    match_count: int
    elapsed_ms: float


@dataclass(frozen=True)
class GlobMethod:
    """計測対象の glob 実装.

    Attributes:
        name: CLI の `--method` で指定する名前.
        tag: 出力行の先頭に出す実装タグ.
        func: ベースパス結合済みパターンを受け取り, 一致したパス一覧を返す関数.
    """

    name: str
    tag: str
    func: Callable[[str], List[str]]
