"""Logic for locating import declaration specifiers in source text."""

import re
from dataclasses import dataclass

# import x from "a"; import { a, b } from 'a'; import * as ns from "a";
# import type { T } from "a"; import "a";
# A leading BOM is allowed before the first declaration
IMPORT_DECL_RE = re.compile(
    r"""^\ufeff?[ \t]*import\s+(?:type\s+)?(?:[\w$*{},\s]+?\s+from\s*)?"""
    r"""(?P<quote>["'])(?P<specifier>[^"'\r\n]*)(?P=quote)""",
    re.MULTILINE,
)


@dataclass(frozen=True)
class ImportOccurrence:
    """A specifier literal in a source file."""

    specifier: str
    quote: str
    start: int  # Offset of the opening quote
    end: int  # Offset just past the closing quote


def scan_imports(text: str) -> list[ImportOccurrence]:
    """Return the specifier literal of every static import declaration."""
    occurrences = []
    for m in IMPORT_DECL_RE.finditer(text):
        start = m.start("quote")
        end = m.end("specifier") + 1
        occurrences.append(
            ImportOccurrence(m.group("specifier"), m.group("quote"), start, end)
        )
    return occurrences
