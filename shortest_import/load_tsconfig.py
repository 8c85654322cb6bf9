"""Logic for reading path aliases out of tsconfig.json / jsconfig.json."""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from shortest_import.deep_merge import deep_merge

logger = logging.getLogger(__name__)

# Strings are matched so that comment markers inside them survive
JSONC_TOKEN_RE = re.compile(
    r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/|,(?=\s*[}\]])',
    re.DOTALL,
)

MAX_EXTENDS_DEPTH = 32


@dataclass(frozen=True)
class TsconfigPaths:
    """Absolute base directory and the raw "paths" mapping of a tsconfig."""

    config_path: Path
    base_url: Path
    paths: dict[str, list[str]] = field(default_factory=dict)


def strip_json_comments(text: str) -> str:
    """Remove // and /* */ comments and trailing commas from JSONC text."""

    def repl(m: re.Match) -> str:
        token = m.group(0)
        return token if token.startswith('"') else ""

    return JSONC_TOKEN_RE.sub(repl, text)


def _read_jsonc(path: Path) -> dict[str, Any]:
    data = json.loads(strip_json_comments(path.read_text(encoding="utf-8-sig")))
    if not isinstance(data, dict):
        msg = f"{path} does not contain a JSON object"
        raise ValueError(msg)
    return data


def _extends_paths(config_path: Path, extends: object) -> list[Path]:
    if isinstance(extends, str):
        extends = [extends]
    if not isinstance(extends, list):
        return []

    resolved = []
    for ref in extends:
        if not isinstance(ref, str):
            continue
        if not ref.startswith(".") and not Path(ref).is_absolute():
            logger.warning(
                "Ignoring package 'extends' %r in %s (not supported)", ref, config_path
            )
            continue
        target = (config_path.parent / ref).resolve()
        if target.suffix != ".json" and not target.exists():
            target = target.with_name(target.name + ".json")
        resolved.append(target)
    return resolved


def _load_compiler_options(config_path: Path, depth: int = 0) -> dict[str, Any]:
    """Load compilerOptions, following "extends" with the child overriding.

    baseUrl is made absolute relative to the file that declares it, and the
    directory of the file declaring "paths" is kept as "_pathsBase".
    """
    if depth > MAX_EXTENDS_DEPTH:
        msg = f"'extends' chain too deep at {config_path}"
        raise ValueError(msg)

    data = _read_jsonc(config_path)
    options: dict[str, Any] = {}
    for parent in _extends_paths(config_path, data.get("extends")):
        options = deep_merge(
            options, _load_compiler_options(parent, depth + 1), replace_keys={"paths"}
        )

    own = dict(data.get("compilerOptions") or {})
    if isinstance(own.get("baseUrl"), str):
        own["baseUrl"] = str((config_path.parent / own["baseUrl"]).resolve())
    if isinstance(own.get("paths"), dict):
        own["_pathsBase"] = str(config_path.parent.resolve())

    return deep_merge(options, own, replace_keys={"paths"})


def load_tsconfig(tsconfig_path: str | Path) -> TsconfigPaths | None:
    """Load alias paths from a tsconfig file.

    Returns None (no aliasing available) if the file is missing, unreadable
    or declares no "paths".
    """
    path = Path(tsconfig_path)
    if path.is_dir():
        path = path / "tsconfig.json"
    if not path.exists():
        logger.warning("tsconfig not found: %s", path)
        return None

    try:
        options = _load_compiler_options(path.resolve())
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.warning("Could not load %s: %s", path, e)
        return None

    paths = options.get("paths")
    if not isinstance(paths, dict) or not paths:
        logger.warning("No 'paths' mapping in %s", path)
        return None

    base = options.get("baseUrl") or options.get("_pathsBase")
    clean_paths = {
        str(alias): [t for t in targets if isinstance(t, str)]
        for alias, targets in paths.items()
        if isinstance(targets, list)
    }
    return TsconfigPaths(path.resolve(), Path(base), clean_paths)
