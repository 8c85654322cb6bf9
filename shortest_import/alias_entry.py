"""Data model for a single alias-prefix to directory mapping."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AliasEntry:
    """Maps an absolute target directory to the alias prefix that names it.

    An entry built from an exact pattern (no trailing "*") only stands for
    its target itself, never for paths below it.
    """

    target_dir: str  # Absolute, normalized, no trailing wildcard
    alias_prefix: str  # e.g. "@utils", "@" or "" for a catch-all "*"
    is_wildcard: bool = True

    @property
    def is_catch_all(self) -> bool:
        """Return True for the entry built from a bare "*" pattern."""
        return self.is_wildcard and self.alias_prefix == ""
