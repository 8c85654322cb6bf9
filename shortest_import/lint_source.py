"""Logic for checking and fixing the imports of one source file."""

import logging
from pathlib import Path

from shortest_import.apply_fixes import apply_fixes
from shortest_import.candidate_form import SpecifierKind
from shortest_import.diagnostic import Diagnostic
from shortest_import.import_analyzer import ImportAnalyzer
from shortest_import.scan_imports import scan_imports

logger = logging.getLogger(__name__)


def _line_col(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def lint_source(
    text: str, file_path: str | Path, analyzer: ImportAnalyzer
) -> list[Diagnostic]:
    """Return a Diagnostic for every import with a preferred equivalent."""
    file_path = Path(file_path)
    # Alias targets are absolute, so the importing directory must be too
    file_dir = file_path.resolve().parent.as_posix()
    diagnostics = []

    for occ in scan_imports(text):
        verdict = analyzer.analyze(file_dir, occ.specifier)
        if verdict.original is None or verdict.alternative is None:
            continue

        alternative = verdict.alternative
        line, column = _line_col(text, occ.start)
        direction = (
            "to-alias" if alternative.kind is SpecifierKind.ALIASED else "to-relative"
        )
        diagnostics.append(
            Diagnostic(
                path=str(file_path),
                line=line,
                column=column,
                start=occ.start,
                end=occ.end,
                quote=occ.quote,
                current=occ.specifier,
                replacement=alternative.specifier_text,
                current_count=verdict.original.segment_count,
                replacement_count=alternative.segment_count,
                direction=direction,
            )
        )
    return diagnostics


def lint_file(
    file_path: Path, analyzer: ImportAnalyzer, *, fix: bool = False
) -> list[Diagnostic]:
    """Lint one file on disk, rewriting it in place when fix is set."""
    # newline="" keeps CRLF/LF exactly as written
    with open(file_path, encoding="utf-8", newline="") as f:
        text = f.read()
    diagnostics = lint_source(text, file_path, analyzer)
    if fix and diagnostics:
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(apply_fixes(text, diagnostics))
        logger.info("Fixed %d import(s) in %s", len(diagnostics), file_path)
    return diagnostics
