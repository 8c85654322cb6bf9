"""Tests for building the alias table."""

from shortest_import.alias_entry import AliasEntry
from shortest_import.alias_table import build_alias_table, strip_wildcard


def test_strip_wildcard() -> None:
    """Verify removal of trailing wildcard markers."""
    assert strip_wildcard("@utils/*") == "@utils"
    assert strip_wildcard("./utils/*") == "./utils"
    assert strip_wildcard("@config") == "@config"
    assert strip_wildcard("*") == ""
    assert strip_wildcard("~*") == "~"
    assert strip_wildcard("*.css") is None


def test_build_single_alias() -> None:
    """Verify that targets are resolved against the base directory."""
    table = build_alias_table("/src", {"@utils/*": ["./utils/*"]})
    assert list(table) == [AliasEntry("/src/utils", "@utils")]


def test_build_normalizes_targets() -> None:
    """Verify that '.' and '..' segments are collapsed."""
    table = build_alias_table("/repo/src", {"@/*": ["./*"], "@lib/*": ["../lib/*"]})
    assert [e.target_dir for e in table] == ["/repo/src", "/repo/lib"]
    assert [e.alias_prefix for e in table] == ["@", "@lib"]


def test_build_multiple_targets_keep_order() -> None:
    """Verify that one alias with several targets yields several entries."""
    table = build_alias_table(
        "/src", {"@shared/*": ["./shared/*", "./legacy/shared/*"]}
    )
    assert list(table) == [
        AliasEntry("/src/shared", "@shared"),
        AliasEntry("/src/legacy/shared", "@shared"),
    ]


def test_build_keeps_duplicate_targets() -> None:
    """Verify that two aliases for one directory are both kept."""
    table = build_alias_table(
        "/src", {"@components/*": ["./components/*"], "@c/*": ["./components/*"]}
    )
    assert len(table) == 2
    assert {e.alias_prefix for e in table} == {"@components", "@c"}


def test_build_empty_and_skipped() -> None:
    """Verify the empty mapping and skipping of inner wildcards."""
    assert not build_alias_table("/src", {})
    table = build_alias_table("/src", {"*.css": ["./styles/*.css"]})
    assert len(table) == 0


def test_catch_all_entry() -> None:
    """Verify that a bare '*' pattern becomes the catch-all entry."""
    table = build_alias_table("/src", {"*": ["./*"]})
    (entry,) = table
    assert entry.is_catch_all
    assert entry.target_dir == "/src"
