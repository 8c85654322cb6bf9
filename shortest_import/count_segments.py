"""Segment counting used to compare competing specifiers."""


def count_segments(specifier: str) -> int:
    """Count the meaningful path segments of an import specifier.

    "./foo" = 1, "../bar/baz" = 3 (.. is kept), "@/components/Button" = 3,
    "@components/Button" = 2. Empty and "." segments are dropped.
    """
    if specifier.startswith("./"):
        specifier = specifier[2:]
    segments = [s for s in specifier.split("/") if s and s != "."]
    # "." alone still names a module
    return max(len(segments), 1)
