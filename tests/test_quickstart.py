"""Test that the quickstart API works for pathnames."""
from __future__ import annotations


def test_quickstart_imports() -> None:
    import pathnames

    assert callable(pathnames.parse)
    assert callable(pathnames.normalize)
    assert callable(pathnames.resolve)


def test_version(expected_version: str) -> None:
    import pathnames

    assert pathnames.__version__ == expected_version


def test_parse_normalize_string() -> None:
    import pathnames

    value = pathnames.parse("/usr/lib/../bin")
    assert value.names == ("usr", "lib", "..", "bin")
    assert pathnames.to_canonical_string(pathnames.normalize(value)) == "/usr/bin"


def test_resolve_and_sibling() -> None:
    import pathnames

    base = pathnames.parse("/a/b")
    other = pathnames.parse("c")
    assert pathnames.to_canonical_string(pathnames.resolve(base, other)) == "/a/b/c"
    assert pathnames.to_canonical_string(pathnames.resolve_sibling(base, other)) == "/a/c"


def test_relativize() -> None:
    import pathnames

    result = pathnames.relativize(pathnames.parse("/a/b"), pathnames.parse("/c"))
    assert pathnames.to_canonical_string(result) == "../../c"


def test_windows_syntax_keyword() -> None:
    import pathnames

    base = pathnames.parse("C:/Users/me", syntax="windows")
    other = pathnames.parse("docs", syntax="windows")
    result = pathnames.resolve(base, other, syntax="windows")
    assert pathnames.to_canonical_string(result, syntax="windows") == "C:\\Users\\me\\docs"


def test_unknown_syntax() -> None:
    import pytest

    import pathnames
    from pathnames.syntaxes import SyntaxNotFoundError

    with pytest.raises(SyntaxNotFoundError):
        pathnames.get_engine("vms")
