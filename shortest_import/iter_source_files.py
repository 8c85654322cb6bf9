"""Logic for expanding command-line paths into source files."""

from collections.abc import Collection, Iterable
from pathlib import Path


def iter_source_files(
    paths: Iterable[str | Path],
    include_extensions: Collection[str],
    exclude: Collection[str] = (),
) -> list[Path]:
    """Return the sorted, de-duplicated source files under paths.

    Explicit file arguments are always kept; directories are walked and
    filtered by extension, skipping any directory named in exclude.
    """
    found: set[Path] = set()
    for raw in paths:
        p = Path(raw)
        if p.is_file():
            found.add(p)
            continue
        if not p.is_dir():
            continue
        for candidate in p.rglob("*"):
            if not candidate.is_file() or candidate.suffix not in include_extensions:
                continue
            rel_parts = candidate.relative_to(p).parts[:-1]
            if any(part in exclude for part in rel_parts):
                continue
            found.add(candidate)
    return sorted(found)
