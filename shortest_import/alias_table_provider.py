"""Caching of the alias table per tsconfig load."""

import logging
import threading
from pathlib import Path

from shortest_import.alias_table import AliasTable, build_alias_table
from shortest_import.compute_config_hash import compute_config_hash
from shortest_import.load_tsconfig import load_tsconfig

logger = logging.getLogger(__name__)


class AliasTableProvider:
    """Holds the current AliasTable for a tsconfig and rebuilds it on change.

    Readers call table() without locking; reload() builds a complete new
    table before swapping the reference.
    """

    def __init__(self, tsconfig_path: str | Path) -> None:
        """Initialize the provider and perform the first load."""
        self.tsconfig_path = Path(tsconfig_path)
        self.config_hash: str | None = None
        self._table = AliasTable()
        self._lock = threading.Lock()
        self.reload()

    def table(self) -> AliasTable:
        """Return the current alias table (empty when no aliasing available)."""
        return self._table

    def reload(self) -> bool:
        """Re-read the tsconfig; return True if the table was replaced."""
        with self._lock:
            loaded = load_tsconfig(self.tsconfig_path)
            if loaded is None:
                new_hash = None
            else:
                new_hash = compute_config_hash(
                    {"base_url": loaded.base_url.as_posix(), "paths": loaded.paths}
                )

            if new_hash == self.config_hash:
                return False

            table = (
                build_alias_table(loaded.base_url, loaded.paths)
                if loaded is not None
                else AliasTable()
            )
            self._table = table
            self.config_hash = new_hash
            logger.info(
                "Loaded %d alias entries from %s", len(table), self.tsconfig_path
            )
            return True
