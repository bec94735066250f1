"""pathnames: a syntax-agnostic path-name model and resolution engine.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import pathnames

    value = pathnames.parse("/usr/lib/../bin")
    value.names                                   # ('usr', 'lib', '..', 'bin')
    pathnames.to_canonical_string(pathnames.normalize(value))   # '/usr/bin'

    base = pathnames.parse("C:/Users/me", syntax="windows")
    pathnames.resolve(base, pathnames.parse("docs", syntax="windows"), syntax="windows")

    pathnames.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from pathnames.convenience import PathName
from pathnames.model.path_value import PathValue

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from pathnames.engine.engine import PathEngine


def get_engine(syntax: str = "unix") -> "PathEngine":
    """Return the shared ``PathEngine`` for a registered syntax.

    Raises
    ------
    pathnames.syntaxes.SyntaxNotFoundError
        If ``syntax`` is not registered.
    """
    from pathnames.syntaxes import get_engine as _get_engine

    return _get_engine(syntax)


def parse(raw: str, syntax: str = "unix") -> PathValue:
    """Parse a path string into a ``PathValue`` without normalizing it.

    Raises
    ------
    pathnames.engine.InvalidPathFormat
        If a name element is invalid in ``syntax``.
    """
    return get_engine(syntax).parse(raw)


def normalize(path: PathValue, syntax: str = "unix") -> PathValue:
    """Lexically drop self names and collapse parent names."""
    return get_engine(syntax).normalize(path)


def resolve(base: PathValue, other: PathValue, syntax: str = "unix") -> PathValue:
    """Resolve ``other`` against ``base``.

    Raises
    ------
    pathnames.engine.UnsupportedRootedRelativePath
        If ``other`` has a root but is not absolute.
    """
    return get_engine(syntax).resolve(base, other)


def resolve_sibling(base: PathValue, other: PathValue, syntax: str = "unix") -> PathValue:
    """Resolve ``other`` against the parent of ``base``."""
    return get_engine(syntax).resolve_sibling(base, other)


def relativize(base: PathValue, other: PathValue, syntax: str = "unix") -> PathValue:
    """Build the relative path leading from ``base`` to ``other``.

    Raises
    ------
    pathnames.engine.IncompatibleRootsError
        If the roots of the operands differ.
    """
    return get_engine(syntax).relativize(base, other)


def to_canonical_string(path: PathValue, syntax: str = "unix") -> str:
    """Return the printable form of ``path``."""
    return get_engine(syntax).to_canonical_string(path)


__all__ = [
    "__version__",
    "PathName",
    "PathValue",
    "get_engine",
    "parse",
    "normalize",
    "resolve",
    "resolve_sibling",
    "relativize",
    "to_canonical_string",
]
