"""Policy applied when two equivalent specifiers have the same length."""

from enum import Enum

from shortest_import.candidate_form import SpecifierKind

_SHORT_NAMES = {
    "keep": "keep-original",
    "alias": "prefer-alias",
    "relative": "prefer-relative",
}


class TieBreakPolicy(str, Enum):
    """Tie-break choices for equal segment counts."""

    KEEP_ORIGINAL = "keep-original"
    PREFER_ALIAS = "prefer-alias"
    PREFER_RELATIVE = "prefer-relative"

    @classmethod
    def parse(cls, value: "str | TieBreakPolicy | None") -> "TieBreakPolicy":
        """Parse a configured value, accepting the short names too."""
        if value is None:
            return cls.KEEP_ORIGINAL
        if isinstance(value, TieBreakPolicy):
            return value
        if not isinstance(value, str):
            msg = f"Tie-break policy must be a string, got {value!r}"
            raise ValueError(msg)
        name = _SHORT_NAMES.get(value, value)
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            msg = f"Unknown tie-break policy {value!r} (expected one of: {choices})"
            raise ValueError(msg) from None

    def preferred_kind(self) -> SpecifierKind | None:
        """Return the kind this policy adopts on a tie, if any."""
        if self is TieBreakPolicy.PREFER_ALIAS:
            return SpecifierKind.ALIASED
        if self is TieBreakPolicy.PREFER_RELATIVE:
            return SpecifierKind.RELATIVE
        return None
