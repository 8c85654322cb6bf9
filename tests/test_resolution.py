"""Tests for resolving specifiers in both directions."""

from pathlib import Path

from shortest_import.alias_table import build_alias_table
from shortest_import.find_shortest_alias import find_shortest_alias, is_path_prefix
from shortest_import.resolve_alias_specifier import resolve_alias_specifier
from shortest_import.to_relative_specifier import to_relative_specifier

EXTS = (".ts", ".tsx", ".js", ".jsx")


def test_is_path_prefix_respects_segments() -> None:
    """Verify that prefix matching does not match partial directory names."""
    assert is_path_prefix("/src/utils", "/src/utils/helpers")
    assert is_path_prefix("/src/utils", "/src/utils")
    assert not is_path_prefix("/src/utils", "/src/utilsExtra/helpers")
    assert is_path_prefix("/", "/anything")


def test_find_shortest_alias_picks_fewest_segments() -> None:
    """Verify that the alias with the fewest segments wins."""
    table = build_alias_table("/src", {"@/*": ["./*"], "@utils/*": ["./utils/*"]})
    assert find_shortest_alias("/src/utils/helpers", table, EXTS) == "@utils/helpers"


def test_find_shortest_alias_strips_extension_and_index() -> None:
    """Verify extension and trailing index stripping."""
    table = build_alias_table("/src", {"@components/*": ["./components/*"]})
    assert find_shortest_alias("/src/components/Button.tsx", table, EXTS) == (
        "@components/Button"
    )
    assert find_shortest_alias("/src/components/index", table, EXTS) == "@components"
    assert find_shortest_alias("/src/components", table, EXTS) == "@components"


def test_find_shortest_alias_no_match() -> None:
    """Verify that paths outside every target have no alias."""
    table = build_alias_table("/src", {"@utils/*": ["./utils/*"]})
    assert find_shortest_alias("/src/utilsExtra/x", table, EXTS) is None
    assert find_shortest_alias("/other/utils/x", table, EXTS) is None


def test_find_shortest_alias_tie_first_entry_wins() -> None:
    """Verify that on equal segment counts the first-built entry wins."""
    table = build_alias_table(
        "/src", {"@ui/*": ["./components/*"], "@cmp/*": ["./components/*"]}
    )
    assert find_shortest_alias("/src/components/Button", table, EXTS) == "@ui/Button"


def test_find_shortest_alias_catch_all() -> None:
    """Verify that the catch-all alias yields a bare specifier."""
    table = build_alias_table("/src", {"*": ["./*"]})
    assert find_shortest_alias("/src/utils/helpers", table, EXTS) == "utils/helpers"
    assert find_shortest_alias("/src", table, EXTS) is None


def test_resolve_alias_specifier_arithmetic() -> None:
    """Verify resolution through the table without touching the disk."""
    table = build_alias_table("/src", {"@/*": ["./*"], "@utils/*": ["./utils/*"]})
    assert resolve_alias_specifier("@/components/Button", table, EXTS) == (
        "/src/components/Button"
    )
    assert resolve_alias_specifier("@utils/helpers", table, EXTS) == (
        "/src/utils/helpers"
    )
    assert resolve_alias_specifier("@utils", table, EXTS) == "/src/utils"


def test_resolve_alias_specifier_ignores_packages() -> None:
    """Verify that external and scoped packages never resolve."""
    table = build_alias_table("/src", {"@/*": ["./*"], "@utils/*": ["./utils/*"]})
    assert resolve_alias_specifier("react", table, EXTS) is None
    assert resolve_alias_specifier("@org/package", table, EXTS) is None
    assert resolve_alias_specifier("@utilsx/a", table, EXTS) is None


def test_resolve_alias_specifier_longest_prefix_first() -> None:
    """Verify that the most specific alias prefix is tried first."""
    table = build_alias_table(
        "/src", {"@app/*": ["./app/*"], "@app/core/*": ["./core/*"]}
    )
    assert resolve_alias_specifier("@app/core/x", table, EXTS) == "/src/core/x"


def test_resolve_alias_specifier_catch_all_needs_probe(tmp_path: Path) -> None:
    """Verify that a catch-all only resolves when existence is checked."""
    (tmp_path / "utils").mkdir()
    (tmp_path / "utils" / "helpers.ts").write_text("")
    table = build_alias_table(tmp_path, {"*": ["./*"]})
    base = tmp_path.as_posix()

    assert resolve_alias_specifier("utils/helpers", table, EXTS) is None

    def exists(p: str) -> bool:
        return Path(p).is_file()

    assert resolve_alias_specifier(
        "utils/helpers", table, EXTS, file_exists=exists
    ) == (f"{base}/utils/helpers.ts")
    assert resolve_alias_specifier("react", table, EXTS, file_exists=exists) is None


def test_resolve_alias_specifier_probe_order(tmp_path: Path) -> None:
    """Verify extension and index candidates across multiple targets."""
    (tmp_path / "b" / "widgets").mkdir(parents=True)
    (tmp_path / "b" / "widgets" / "index.tsx").write_text("")
    table = build_alias_table(tmp_path, {"@w/*": ["./a/*", "./b/*"]})
    base = tmp_path.as_posix()

    def exists(p: str) -> bool:
        return Path(p).is_file()

    assert resolve_alias_specifier("@w/widgets", table, EXTS, file_exists=exists) == (
        f"{base}/b/widgets/index.tsx"
    )
    assert resolve_alias_specifier("@w/missing", table, EXTS, file_exists=exists) is None


def test_to_relative_specifier() -> None:
    """Verify conversion of absolute paths to idiomatic relative specifiers."""
    assert to_relative_specifier("/src/components", "/src/components/Button", EXTS) == (
        "./Button"
    )
    assert to_relative_specifier("/src/components", "/src/utils/helpers.ts", EXTS) == (
        "../utils/helpers"
    )
    assert to_relative_specifier("/src/a", "/src/a/lib/index.ts", EXTS) == "./lib"
    assert to_relative_specifier("/src/a", "/src/a/index.ts", EXTS) == "."
    assert to_relative_specifier("/src/a/b", "/src/a", EXTS) == ".."
    assert to_relative_specifier("/src", "/src/.hidden", EXTS) == "./.hidden"


def test_exact_pattern_names_only_its_target() -> None:
    """Verify that an alias without a wildcard is never extended with a remainder."""
    table = build_alias_table(
        "/src", {"@app": ["./app/main"], "@cfg": ["./config/index.ts"]}
    )
    assert [e.is_wildcard for e in table] == [False, False]

    assert find_shortest_alias("/src/app/main/helpers", table, EXTS) is None
    assert find_shortest_alias("/src/app/main.ts", table, EXTS) == "@app"
    assert find_shortest_alias("/src/config", table, EXTS) == "@cfg"

    assert resolve_alias_specifier("@app/helpers", table, EXTS) is None
    assert resolve_alias_specifier("@app", table, EXTS) == "/src/app/main"
    assert resolve_alias_specifier("@cfg", table, EXTS) == "/src/config/index.ts"
