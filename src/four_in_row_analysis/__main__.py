from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv:
        return analyze_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"analyze", "analysis"}:
        return analyze_main(rest)

    if cmd.startswith("-"):
        return analyze_main(argv)

    print("Usage:")
    print("  python -m four_in_row_analysis analyze [--csv ...] [--searched-only]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
