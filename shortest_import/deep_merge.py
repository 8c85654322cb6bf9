"""Logic for deep merging configuration dictionaries."""

from collections.abc import Collection
from typing import Any

ADDITIVE_KEYS = frozenset({"exclude"})


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    replace_keys: Collection[str] = (),
) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively, unless their key is in replace_keys.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for additive keys.
    - 'exclude' is additive.
    """
    result = base.copy()
    for key, value in update.items():
        if (
            key in result
            and key not in replace_keys
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value, replace_keys)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            # Additive merge, deduplicated, first occurrence order
            result[key] = list(dict.fromkeys([*result[key], *value]))
        else:
            result[key] = value
    return result
