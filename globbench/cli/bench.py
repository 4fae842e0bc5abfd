"""glob ベンチマーク CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from globbench.benchmark.cases import DEFAULT_CASES
from globbench.benchmark.methods import DEFAULT_METHOD, available_methods
from globbench.benchmark.runner import run_cases
from globbench.benchmark.utils import LOGGER_NAME, configure_logger
from globbench.config import BenchConfig

LOGGER = logging.getLogger(LOGGER_NAME)
PROG = "globbench"


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを構築する."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "固定の glob パターンを search_path 配下で実行し, "
            "`tag,case,pattern,count,elapsed_ms` 形式で標準出力へ書き出す"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # 未指定時は argparse ではなく main 側で終了コード 1 を返す
    parser.add_argument("search_path", nargs="?", default=None, help="検索ベースディレクトリ")
    # 2つ目以降の位置引数は受け取って無視する
    parser.add_argument("extra_args", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument(
        "--method",
        choices=available_methods(),
        default=DEFAULT_METHOD,
        help="計測する glob 実装",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="デバッグログを有効化する",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """CLI 引数を解析する.

    Args:
        argv: 解析対象引数. 省略時は `sys.argv`.

    Returns:
        解析済み引数. search_path 未指定時は None.
    """
    return build_parser().parse_intermixed_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """エントリポイント.

    Args:
        argv: 解析対象引数. 省略時は `sys.argv`.

    Returns:
        終了コード.
    """
    args = parse_args(argv)

    if args.search_path is None:
        build_parser().print_usage(sys.stderr)
        return 1

    config = BenchConfig.from_args(args)
    configure_logger(config.debug)
    if args.extra_args:
        LOGGER.debug("余分な位置引数を無視します: %s", args.extra_args)

    run_cases(config.search_path, DEFAULT_CASES, config.glob_method)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
