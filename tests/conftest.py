"""テスト共通フィクスチャ."""

from __future__ import annotations

from pathlib import Path

import pytest

from globbench.logging import LoggerManager

# DEFAULT_CASES の各パターンに対する期待一致件数
EXPECTED_COUNTS = {"basic": 3, "intermediate": 2, "advanced": 2}

_TREE_FILES = [
    # basic: stdlib/public/*/*.swift
    "stdlib/public/core/Array.swift",
    "stdlib/public/core/String.swift",
    "stdlib/public/core/notes.txt",
    "stdlib/public/Concurrency/Task.swift",
    "stdlib/private/Hidden.swift",
    # intermediate: lib/SILOptimizer/*/*.cpp
    "lib/SILOptimizer/Transforms/DCE.cpp",
    "lib/SILOptimizer/Analysis/alias.cpp",
    "lib/SILOptimizer/Analysis/alias.h",
    # advanced: lib/*/[A-Z]*.cpp
    "lib/Sema/TypeCheck.cpp",
    "lib/Sema/misc.cpp",
    "lib/AST/Decl.cpp",
]


@pytest.fixture(autouse=True)
def reset_logger_manager():
    """テストごとに LoggerManager のシングルトンを破棄する."""
    LoggerManager.reset()
    yield
    LoggerManager.reset()


@pytest.fixture
def expected_counts() -> dict[str, int]:
    """固定ツリーに対するケース名ごとの期待一致件数."""
    return dict(EXPECTED_COUNTS)


@pytest.fixture
def create_source_tree(tmp_path: Path):
    """DEFAULT_CASES に一致するファイルを含むディレクトリツリーを作成するファクトリフィクスチャ.

    Args:
        tmp_path: pytest組み込みの一時ディレクトリ.

    Returns:
        ツリー作成関数. 引数:
            files: ベースからの相対ファイルパス一覧 (デフォルト: 固定ツリー).
            subdir: ベースとするサブディレクトリ名. Noneならtmp_path直下に作成.

    Example:
        >>> def test_example(create_source_tree):
        ...     base = create_source_tree()
        ...     assert (base / "lib" / "AST" / "Decl.cpp").exists()
    """

    def _create(files: list[str] | None = None, *, subdir: str | None = None) -> Path:
        base = tmp_path / subdir if subdir else tmp_path
        for relative in _TREE_FILES if files is None else files:
            path = base / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")
        return base

    return _create
