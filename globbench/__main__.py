"""`python -m globbench` のエントリーポイント."""

from globbench.cli.bench import main

if __name__ == "__main__":
    raise SystemExit(main())
