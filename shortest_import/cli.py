"""Command-line entry point: report (and optionally fix) imports that have a
shorter equivalent form under the project's tsconfig path aliases.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from shortest_import.alias_table_provider import AliasTableProvider
from shortest_import.analyzer_settings import AnalyzerSettings
from shortest_import.import_analyzer import ImportAnalyzer
from shortest_import.iter_source_files import iter_source_files
from shortest_import.lint_report import LintReport
from shortest_import.lint_source import lint_file
from shortest_import.load_config import load_config
from shortest_import.tie_break_policy import TieBreakPolicy

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        prog="shortest-import",
        description="Prefer the import specifier with the fewest path segments.",
    )
    ap.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to check (default: current directory)",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument("--tsconfig", help="Path to tsconfig.json / jsconfig.json")
    ap.add_argument(
        "--prefer-on-tie",
        choices=[p.value for p in TieBreakPolicy],
        help="What to do when both forms have the same segment count",
    )
    ap.add_argument(
        "--check-exists",
        action="store_true",
        help="Only resolve aliases to files that exist on disk",
    )
    ap.add_argument("--fix", action="store_true", help="Rewrite files in place")
    ap.add_argument("--report", type=Path, help="Write a JSON report to this path")
    ap.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return ap


def run(args: argparse.Namespace) -> int:
    """Lint the requested paths; return the process exit status."""
    try:
        config = load_config(args.config)
        if args.tsconfig:
            config["tsconfig"] = args.tsconfig
        if args.prefer_on_tie:
            config["prefer_on_tie"] = args.prefer_on_tie
        if args.check_exists:
            config["check_exists"] = True
        settings = AnalyzerSettings.from_config(config)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    provider = AliasTableProvider(config["tsconfig"])
    analyzer = ImportAnalyzer(provider.table(), settings)
    report = LintReport(provider.config_hash)
    report.fixed = args.fix

    files = iter_source_files(
        args.paths, config["include_extensions"], config["exclude"]
    )
    if provider.table():
        for path in files:
            try:
                diagnostics = lint_file(path, analyzer, fix=args.fix)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping %s: %s", path, e)
                continue
            report.add_file(diagnostics)
            for d in diagnostics:
                print(d.format())

    if args.report:
        report.write(args.report)

    total = len(report.diagnostics)
    if total:
        verb = "Fixed" if args.fix else "Found"
        file_count = len({d.path for d in report.diagnostics})
        print(f"{verb} {total} import(s) with a preferred form in {file_count} file(s)")
    return 0 if args.fix or not total else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the linter."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
