"""globbench.cli: コマンドラインエントリーポイント."""
