"""Logic for loading and merging the linter configuration file."""

import logging
from pathlib import Path
from typing import Any

import yaml

from shortest_import.analyzer_settings import DEFAULT_EXTENSIONS
from shortest_import.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".shortest-import.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "tsconfig": "tsconfig.json",
    "prefer_on_tie": "keep-original",
    "extensions": list(DEFAULT_EXTENSIONS),
    "index_name": "index",
    "check_exists": False,
    "include_extensions": list(DEFAULT_EXTENSIONS),
    "exclude": ["node_modules", "dist", "build", ".git"],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Without an explicit path, ".shortest-import.yml" in the working
    directory is used when present.
    """
    config = DEFAULT_CONFIG.copy()
    p = Path(path) if path else Path.cwd() / DEFAULT_CONFIG_NAME
    if p.exists():
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(user_config, dict):
            msg = f"Configuration in {p} must be a mapping"
            raise ValueError(msg)
        config = deep_merge(config, user_config)
        logger.debug("Loaded configuration from %s", p)
    elif path:
        logger.warning("Configuration file not found: %s", p)
    return config
