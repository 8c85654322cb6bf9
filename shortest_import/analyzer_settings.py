"""Immutable settings consumed by the import analyzer."""

from dataclasses import dataclass
from typing import Any

from shortest_import.tie_break_policy import TieBreakPolicy

DEFAULT_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")


@dataclass(frozen=True)
class AnalyzerSettings:
    """Policy constants for resolution and the tie-break decision."""

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    index_name: str = "index"
    tie_break: TieBreakPolicy = TieBreakPolicy.KEEP_ORIGINAL
    check_exists: bool = False

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "AnalyzerSettings":
        """Build settings from a merged configuration dictionary."""
        extensions = config.get("extensions") or list(DEFAULT_EXTENSIONS)
        if not isinstance(extensions, list) or not all(
            isinstance(ext, str) for ext in extensions
        ):
            msg = f"'extensions' must be a list of strings, got {extensions!r}"
            raise ValueError(msg)

        index_name = config.get("index_name", "index") or ""
        if not isinstance(index_name, str):
            msg = f"'index_name' must be a string, got {index_name!r}"
            raise ValueError(msg)

        return cls(
            extensions=tuple(extensions),
            index_name=index_name,
            tie_break=TieBreakPolicy.parse(config.get("prefer_on_tie")),
            check_exists=bool(config.get("check_exists", False)),
        )
