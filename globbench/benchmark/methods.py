"""計測対象 glob 実装の登録と解決."""

from __future__ import annotations

import glob
import re
from pathlib import Path
from typing import Dict, List, Tuple

from globbench.benchmark.models import GlobMethod

DEFAULT_METHOD = "glob"
_MAGIC = re.compile(r"[*?[]")


def _glob_glob(full_pattern: str) -> List[str]:
    """`glob.glob` で一致パスを取得する."""
    return glob.glob(full_pattern)


def _glob_iglob(full_pattern: str) -> List[str]:
    """`glob.iglob` のイテレータを最後まで消費して一致パスを取得する."""
    return list(glob.iglob(full_pattern))


def _is_hidden_match(
    pattern_parts: Tuple[str, ...], match_parts: Tuple[str, ...]
) -> bool:
    """ワイルドカードのセグメントが `.` 始まりの名前に一致したかを判定する.

    `glob.glob` は `.` で始まらないワイルドカードを隠しエントリに一致させない.

    Args:
        pattern_parts: アンカーを除いたパターンのセグメント.
        match_parts: アンカーを除いた一致パスのセグメント.

    Returns:
        隠しエントリへの一致を含む場合 True.
    """
    if len(pattern_parts) != len(match_parts):
        # `**` で段数がずれた場合はパターンに明記された名前以外を隠しエントリとみなす
        return any(
            name.startswith(".") and name not in pattern_parts for name in match_parts
        )
    return any(
        name.startswith(".")
        and _MAGIC.search(segment) is not None
        and not segment.startswith(".")
        for segment, name in zip(pattern_parts, match_parts)
    )


def _pathlib_glob(full_pattern: str) -> List[str]:
    """`Path.glob` で一致パスを取得する.

    `Path.glob` は相対パターンしか受け付けないため,
    結合済みパターンをアンカーと残りの相対部分に分けて渡す.
    `*` が隠しエントリにも一致する点は `glob.glob` に揃えて除外する.

    Args:
        full_pattern: ベースパス結合済みパターン.

    Returns:
        一致したパス文字列のリスト.
    """
    path = Path(full_pattern)
    root = Path(path.anchor) if path.anchor else Path(".")
    relative = path.relative_to(root) if path.anchor else path
    skip = len(root.parts)
    return [
        str(match)
        for match in root.glob(str(relative))
        if not _is_hidden_match(relative.parts, match.parts[skip:])
    ]


_METHODS: Dict[str, GlobMethod] = {
    method.name: method
    for method in (
        GlobMethod(name="glob", tag="python", func=_glob_glob),
        GlobMethod(name="iglob", tag="python-iglob", func=_glob_iglob),
        GlobMethod(name="pathlib", tag="python-pathlib", func=_pathlib_glob),
    )
}


def available_methods() -> List[str]:
    """登録済み glob 実装名を登録順で返す."""
    return list(_METHODS)


def get_method(name: str) -> GlobMethod:
    """名前から glob 実装を取得する.

    Args:
        name: glob 実装名.

    Returns:
        登録済みの GlobMethod.

    Raises:
        KeyError: 未登録の名前の場合.
    """
    try:
        return _METHODS[name]
    except KeyError:
        raise KeyError(
            f"未対応の method です: {name} (利用可能: {', '.join(_METHODS)})"
        ) from None
