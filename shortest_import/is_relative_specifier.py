"""Classification of import specifiers."""


def is_relative_specifier(specifier: str) -> bool:
    """Return True for "./x", "../x", "." and ".." style specifiers."""
    return specifier.startswith(".")
