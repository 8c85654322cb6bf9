"""Normalization helpers shared by both resolution directions."""

from collections.abc import Sequence


def strip_source_extension(path: str, extensions: Sequence[str]) -> str:
    """Remove the first matching known source extension from the end of path."""
    for ext in extensions:
        if ext and path.endswith(ext) and len(path) > len(ext):
            return path[: -len(ext)]
    return path


def strip_index_segment(specifier: str, index_name: str) -> str:
    """Collapse a trailing "/index" segment into its directory."""
    suffix = f"/{index_name}"
    if index_name and specifier.endswith(suffix) and len(specifier) > len(suffix):
        return specifier[: -len(suffix)]
    return specifier
