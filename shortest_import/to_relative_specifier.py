"""Logic for expressing an absolute module path relative to a directory."""

import posixpath
from collections.abc import Sequence

from shortest_import.strip_specifier import (
    strip_index_segment,
    strip_source_extension,
)


def to_relative_specifier(
    from_dir: str,
    to_absolute: str,
    extensions: Sequence[str],
    index_name: str = "index",
) -> str:
    """Build an idiomatic relative specifier ("./x" or "../x") for a path."""
    relative = posixpath.relpath(to_absolute, from_dir)

    # A bare sibling name is not a relative specifier
    if relative != ".." and not relative.startswith(("./", "../")):
        relative = "./" + relative

    relative = strip_source_extension(relative, extensions)
    relative = strip_index_segment(relative, index_name)
    if relative == "./.":
        relative = "."
    return relative
