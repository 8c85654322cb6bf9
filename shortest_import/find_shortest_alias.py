"""Logic for turning an absolute module path into its shortest alias specifier."""

from collections.abc import Sequence

from shortest_import.alias_entry import AliasEntry
from shortest_import.alias_table import AliasTable
from shortest_import.count_segments import count_segments
from shortest_import.strip_specifier import (
    strip_index_segment,
    strip_source_extension,
)


def is_path_prefix(directory: str, path: str) -> bool:
    """Return True if directory contains path, on segment boundaries."""
    if path == directory:
        return True
    return path.startswith(directory.rstrip("/") + "/")


def find_shortest_alias(
    absolute_path: str,
    table: AliasTable,
    extensions: Sequence[str],
    index_name: str = "index",
) -> str | None:
    """Return the alias specifier with the fewest segments for absolute_path.

    On equal segment counts the entry built first wins.
    """
    normalized = strip_source_extension(absolute_path, extensions)

    shortest: str | None = None
    shortest_segments = 0

    for entry in table:
        if not entry.is_wildcard:
            # Exact patterns only name their target module
            target = strip_index_segment(
                strip_source_extension(entry.target_dir, extensions), index_name
            )
            if strip_index_segment(normalized, index_name) != target:
                continue
            alias_import = entry.alias_prefix
        else:
            if not is_path_prefix(entry.target_dir, normalized):
                continue
            alias_import = _wildcard_alias(entry, normalized, index_name)
            if alias_import is None:
                continue

        segments = count_segments(alias_import)
        if shortest is None or segments < shortest_segments:
            shortest = alias_import
            shortest_segments = segments

    return shortest


def _wildcard_alias(entry: AliasEntry, normalized: str, index_name: str) -> str | None:
    remainder = normalized[len(entry.target_dir.rstrip("/")) :]
    if entry.is_catch_all:
        remainder = remainder.lstrip("/")
        if not remainder:
            return None
    return strip_index_segment(entry.alias_prefix + remainder, index_name)
