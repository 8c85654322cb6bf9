"""Logic for resolving an aliased specifier to an absolute module path."""

import logging
import posixpath
from collections.abc import Callable, Iterator, Sequence

from shortest_import.alias_entry import AliasEntry
from shortest_import.alias_table import AliasTable

logger = logging.getLogger(__name__)

FileExists = Callable[[str], bool]


def match_alias(specifier: str, entry: AliasEntry) -> str | None:
    """Return the part of specifier after the entry's prefix, or None."""
    prefix = entry.alias_prefix
    if entry.is_catch_all:
        return specifier
    if specifier == prefix:
        return ""
    if entry.is_wildcard and specifier.startswith(prefix + "/"):
        return specifier[len(prefix) + 1 :]
    return None


def _candidates(base: str, extensions: Sequence[str], index_name: str) -> Iterator[str]:
    yield base
    for ext in extensions:
        if ext:
            yield base + ext
    if index_name:
        index_base = posixpath.join(base, index_name)
        for ext in extensions:
            if ext:
                yield index_base + ext


def resolve_alias_specifier(
    specifier: str,
    table: AliasTable,
    extensions: Sequence[str],
    index_name: str = "index",
    file_exists: FileExists | None = None,
) -> str | None:
    """Resolve specifier through the alias table.

    Matching entries are tried longest prefix first, then in configuration
    order. Without file_exists the first candidate of the first match is
    taken as-is (pure path arithmetic) and catch-all entries are ignored.
    """
    matches: list[tuple[int, int, AliasEntry, str]] = []
    for order, entry in enumerate(table):
        if entry.is_catch_all and file_exists is None:
            continue
        remainder = match_alias(specifier, entry)
        if remainder is None:
            continue
        matches.append((-len(entry.alias_prefix), order, entry, remainder))

    if not matches:
        return None

    matches.sort(key=lambda m: (m[0], m[1]))

    for _, _, entry, remainder in matches:
        base = posixpath.normpath(posixpath.join(entry.target_dir, remainder))
        if file_exists is None:
            return base
        for candidate in _candidates(base, extensions, index_name):
            if file_exists(candidate):
                return candidate

    logger.debug("No existing file for aliased specifier %s", specifier)
    return None
