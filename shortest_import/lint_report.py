"""Logic for writing a JSON report of a lint run."""

import json
import time
from collections import Counter
from pathlib import Path
from typing import Any

from shortest_import.diagnostic import Diagnostic

SCHEMA_VERSION = 1


class LintReport:
    """Collects diagnostics across files and serializes them as JSON."""

    def __init__(self, config_hash: str | None) -> None:
        """Initialize an empty report for the given alias configuration."""
        self.config_hash = config_hash
        self.diagnostics: list[Diagnostic] = []
        self.files_checked = 0
        self.fixed = False
        self.start_time = time.time()

    def add_file(self, diagnostics: list[Diagnostic]) -> None:
        """Record the diagnostics of one checked file."""
        self.files_checked += 1
        self.diagnostics.extend(diagnostics)

    def to_dict(self) -> dict[str, Any]:
        """Return the report as a JSON-serializable dictionary."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": SCHEMA_VERSION,
                "files_checked": self.files_checked,
                "total_diagnostics": len(self.diagnostics),
                "fixed": self.fixed,
            },
            "results": [
                {
                    "path": d.path,
                    "line": d.line,
                    "column": d.column,
                    "current": d.current,
                    "replacement": d.replacement,
                    "current_count": d.current_count,
                    "replacement_count": d.replacement_count,
                    "direction": d.direction,
                    "message": d.message,
                }
                for d in self.diagnostics
            ],
            "stats": self._compute_stats(),
        }

    def write(self, path: str | Path) -> None:
        """Write the report to path."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        direction_counts = Counter(d.direction for d in self.diagnostics)
        return {
            "direction_counts": dict(direction_counts),
            "ties": sum(1 for d in self.diagnostics if d.is_tie),
            "files_with_diagnostics": len({d.path for d in self.diagnostics}),
        }
