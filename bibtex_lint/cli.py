"""BibTeX linter and normalizer CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from .bibliography import load_bibliography
from .errors import BibTeXLintError
from .records import Entry
from .report import markdown_report, terminal_summary
from .schema import ENTRY_TYPE_NAMES, schema_for
from .serializer import serialize


class Console:
    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def debug(self, message: str) -> None:
        if self.verbose:
            print(f"[debug] {message}")


def default_report_path(input_path: Path) -> Path:
    return input_path.with_name(f"{input_path.stem}_report.md")


def default_normalized_path(input_path: Path) -> Path:
    return input_path.with_name(f"{input_path.stem}_normalized.bib")


def list_types() -> str:
    lines: list[str] = []
    for name in ENTRY_TYPE_NAMES:
        entry_schema = schema_for(name)
        required = ", ".join(entry_schema.required) or "-"
        lines.append(f"{name}: required [{required}] {entry_schema.description}")
    return "\n".join(lines)


def run(args: argparse.Namespace) -> int:
    if args.list_types:
        print(list_types())
        return 0

    if not args.input_bib:
        print("fatal: no input file given", file=sys.stderr)
        return 2

    console = Console(verbose=args.verbose)
    input_path = Path(args.input_bib).expanduser().resolve()
    if not input_path.exists():
        print(f"fatal: input file does not exist: {input_path}", file=sys.stderr)
        return 2

    try:
        text = input_path.read_text(encoding="utf-8")
        records = load_bibliography(text)
    except (BibTeXLintError, OSError, UnicodeDecodeError) as exc:
        print(f"fatal: could not load bib file: {exc}", file=sys.stderr)
        return 2

    console.debug(f"loaded {len(records)} records from {input_path}")
    for record in records:
        if isinstance(record, Entry) and record.warnings:
            console.debug(f"{record.cite_key or '<no key>'}: {len(record.warnings)} warnings")

    report_path = Path(args.report).expanduser().resolve() if args.report else default_report_path(input_path)
    report_path.write_text(markdown_report(input_path, records), encoding="utf-8")

    if args.fix:
        out_bib = Path(args.out_bib).expanduser().resolve() if args.out_bib else default_normalized_path(input_path)
        out_bib.write_text(serialize(records) + "\n", encoding="utf-8")
        print(f"Wrote normalized BibTeX: {out_bib}")

    print(f"Wrote markdown report: {report_path}")
    print(terminal_summary(records))

    warned = sum(1 for record in records if isinstance(record, Entry) and record.warnings)
    return 1 if warned else 0


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bibtex-lint", description="BibTeX linter and normalizer")
    parser.add_argument("input_bib", nargs="?", help="Path to input .bib file")
    parser.add_argument("--fix", action="store_true", help="Write a normalized _normalized.bib output")
    parser.add_argument("--report", help="Path to markdown report output")
    parser.add_argument("--out-bib", help="Path to normalized bib output (only with --fix)")
    parser.add_argument("--list-types", action="store_true", help="List known entry types and exit")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logs")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
