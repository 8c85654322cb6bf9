"""Data model for a reported shorter-import finding."""

from dataclasses import dataclass

SHORTER_MESSAGE = (
    'A shorter import path is available: "{shorter}" '
    "({shorter_count} segments vs {current_count})"
)
TIE_MESSAGE = (
    'An equally short import path is preferred: "{shorter}" '
    "({shorter_count} segments vs {current_count})"
)


@dataclass(frozen=True)
class Diagnostic:
    """Represents one import specifier that should be rewritten."""

    path: str
    line: int  # 1-based
    column: int  # 1-based, at the opening quote
    start: int
    end: int
    quote: str
    current: str
    replacement: str
    current_count: int
    replacement_count: int
    direction: str  # "to-alias" or "to-relative"

    @property
    def is_tie(self) -> bool:
        return self.current_count == self.replacement_count

    @property
    def message(self) -> str:
        template = TIE_MESSAGE if self.is_tie else SHORTER_MESSAGE
        return template.format(
            shorter=self.replacement,
            shorter_count=self.replacement_count,
            current_count=self.current_count,
        )

    def format(self) -> str:
        """Render as "path:line:col: message"."""
        return f"{self.path}:{self.line}:{self.column}: {self.message}"
