"""Logic for building the alias lookup table from a paths mapping."""

import logging
import posixpath
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from shortest_import.alias_entry import AliasEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AliasTable:
    """Ordered, read-only collection of alias entries (configuration order)."""

    entries: tuple[AliasEntry, ...] = ()

    def __iter__(self) -> Iterator[AliasEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)


def strip_wildcard(pattern: str) -> str | None:
    """Remove a trailing "/*" (or bare "*") from a pattern.

    Returns None when a wildcard remains elsewhere in the pattern.
    """
    if pattern.endswith("/*"):
        clean = pattern[:-2]
    elif pattern.endswith("*"):
        clean = pattern[:-1]
    else:
        clean = pattern
    if "*" in clean:
        return None
    return clean


def build_alias_table(
    base_dir: str | Path, paths: Mapping[str, Sequence[str]]
) -> AliasTable:
    """Build an AliasTable from a base directory and an alias -> targets mapping.

    One entry is emitted per (alias, target) pair. Duplicates are kept.
    """
    base = Path(base_dir).as_posix()
    entries: list[AliasEntry] = []

    for alias, targets in paths.items():
        clean_alias = strip_wildcard(alias)
        if clean_alias is None:
            logger.debug("Skipping alias with inner wildcard: %s", alias)
            continue
        if isinstance(targets, str):
            targets = [targets]

        for target in targets:
            clean_target = strip_wildcard(target)
            if clean_target is None:
                logger.debug("Skipping target with inner wildcard: %s", target)
                continue
            target_dir = posixpath.normpath(
                posixpath.join(base, clean_target.replace("\\", "/"))
            )
            entries.append(AliasEntry(target_dir, clean_alias, alias.endswith("*")))

    return AliasTable(tuple(entries))
