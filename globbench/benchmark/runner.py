"""ベンチマークケース実行処理."""

from __future__ import annotations

import logging
import os
import re
import sys
import time
from typing import Iterable, List, Optional, TextIO

from globbench.benchmark.models import BenchmarkCase, CaseResult, GlobMethod
from globbench.benchmark.utils import LOGGER_NAME, ns_to_ms

LOGGER = logging.getLogger(LOGGER_NAME)

# 一致件数 0 として扱う glob 実行時の例外
_GLOB_ERRORS = (OSError, ValueError, NotImplementedError, re.error)


def _count_matches(method: GlobMethod, full_pattern: str) -> tuple[int, int]:
    """glob を1回実行し, 一致件数と経過ナノ秒を返す.

    Args:
        method: 使用する glob 実装.
        full_pattern: ベースパス結合済みパターン.

    Returns:
        (一致件数, 経過ナノ秒). glob が失敗した場合の件数は 0.
    """
    matches: Optional[List[str]] = None
    start = time.perf_counter_ns()
    try:
        matches = method.func(full_pattern)
    except _GLOB_ERRORS:
        matches = None
    elapsed_ns = time.perf_counter_ns() - start
    return (len(matches) if matches else 0), elapsed_ns


def run_case(base_path: str, case: BenchmarkCase, method: GlobMethod) -> CaseResult:
    """1ケースの glob を計測する.

    base_path の存在は検証しない. 存在しない場合は一致件数 0 として結果を返す.

    Args:
        base_path: 検索ベースディレクトリ.
        case: 計測ケース.
        method: 使用する glob 実装.

    Returns:
        計測結果.
    """
    full_pattern = os.path.join(base_path, case.pattern)
    LOGGER.debug("case=%s method=%s pattern=%s", case.name, method.name, full_pattern)

    match_count, elapsed_ns = _count_matches(method, full_pattern)
    result = CaseResult(
        name=case.name,
        pattern=case.pattern,
        match_count=match_count,
        elapsed_ms=ns_to_ms(elapsed_ns),
    )
    LOGGER.debug(
        "case=%s matches=%s elapsed_ns=%s", case.name, match_count, elapsed_ns
    )
    return result


def format_result_line(tag: str, result: CaseResult) -> str:
    """計測結果を出力行へ整形する.

    Args:
        tag: 実装タグ.
        result: 計測結果.

    Returns:
        `<tag>,<name>,<pattern>,<match_count>,<elapsed_ms>` 形式の文字列 (改行なし).
    """
    return (
        f"{tag},{result.name},{result.pattern},"
        f"{result.match_count},{result.elapsed_ms:.3f}"
    )


def run_cases(
    base_path: str,
    cases: Iterable[BenchmarkCase],
    method: GlobMethod,
    stream: Optional[TextIO] = None,
) -> int:
    """全ケースを順に計測し, 1ケース1行で出力する.

    Args:
        base_path: 検索ベースディレクトリ.
        cases: 計測ケース. この順序で出力される.
        method: 使用する glob 実装.
        stream: 出力先. 省略時は `sys.stdout`.

    Returns:
        出力した行数.
    """
    out = stream if stream is not None else sys.stdout
    written = 0
    for case in cases:
        result = run_case(base_path, case, method)
        out.write(format_result_line(method.tag, result) + "\n")
        out.flush()
        written += 1
    return written
