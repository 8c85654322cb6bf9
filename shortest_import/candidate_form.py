"""Data models for the specifier forms being compared."""

from dataclasses import dataclass, field
from enum import Enum

from shortest_import.count_segments import count_segments
from shortest_import.is_relative_specifier import is_relative_specifier


class SpecifierKind(str, Enum):
    """Whether a specifier is relative or goes through an alias."""

    RELATIVE = "relative"
    ALIASED = "aliased"


@dataclass(frozen=True)
class CandidateForm:
    """A specifier text together with its segment count and kind."""

    specifier_text: str
    kind: SpecifierKind
    segment_count: int = field(default=0)

    def __post_init__(self) -> None:
        if not self.segment_count:
            object.__setattr__(
                self, "segment_count", count_segments(self.specifier_text)
            )

    @classmethod
    def of(cls, specifier: str) -> "CandidateForm":
        """Classify a literal specifier and wrap it."""
        kind = (
            SpecifierKind.RELATIVE
            if is_relative_specifier(specifier)
            else SpecifierKind.ALIASED
        )
        return cls(specifier, kind)
