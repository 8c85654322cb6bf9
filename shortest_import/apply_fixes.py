"""Logic for substituting replacement specifiers into source text."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shortest_import.diagnostic import Diagnostic


def apply_fixes(text: str, diagnostics: "Iterable[Diagnostic]") -> str:
    """Replace each diagnosed literal, keeping its original quote character."""
    # Right to left so earlier offsets stay valid
    for d in sorted(diagnostics, key=lambda d: d.start, reverse=True):
        text = f"{text[: d.start]}{d.quote}{d.replacement}{d.quote}{text[d.end :]}"
    return text
