"""CLI entry point and argument parsing."""
from __future__ import annotations

import argparse
import sys

from typedset.internals.version import print_banner


def main(argv: list[str] | None = None) -> int:
    """Run a set script.

    Returns:
        0 on success, 1 on success with warnings, 2 on errors.
    """
    ap = argparse.ArgumentParser(prog="typedset", description="Run a set script (.tset)")

    ap.add_argument("source", nargs='?', help="Path to script file (.tset)")
    ap.add_argument("--version", action="store_true", help="Show version and exit")
    ap.add_argument("--check", action="store_true",
                    help="Only parse and check the script, do not run it")
    ap.add_argument("--dump-parse", action="store_true", help="Print raw Lark tree")
    ap.add_argument("--dump-ast", action="store_true", help="Print AST")
    args = ap.parse_args(argv)

    if args.version:
        print_banner()
        return 0

    if not args.source:
        print("error: source file required", file=sys.stderr)
        return 2

    from typedset.compiler.loader import resolve_source_path
    from typedset.compiler.pipeline import run_source
    from typedset.internals.report import Reporter

    src_path = resolve_source_path(args.source)

    try:
        src = src_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {src_path}: {e}", file=sys.stderr)
        return 2

    reporter = Reporter(source=src, filename=str(src_path))
    result = run_source(
        src,
        reporter,
        check_only=args.check,
        dump_parse=args.dump_parse,
        dump_ast=args.dump_ast,
    )
    reporter.print()
    return result


if __name__ == "__main__":
    raise SystemExit(main())
