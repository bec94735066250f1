"""Convenience API: a pathlib-style wrapper around a value and its engine.

The top-level ``pathnames`` module exposes each algorithm as a function
taking ``PathValue`` arguments.  ``PathName`` bundles a value with the
engine for its syntax so calls chain naturally.

Example
-------
::

    from pathnames import PathName

    path = PathName("/srv/www") / "../logs/./access.log"
    str(path.normalize())  # '/srv/logs/access.log'
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Union

from pathnames.model.path_value import PathValue

if TYPE_CHECKING:
    from pathnames.engine.engine import PathEngine

PathLike = Union["PathName", PathValue, str]


class PathName:
    """An immutable path bound to the engine of its syntax.

    Parameters
    ----------
    raw:
        Path string to parse.
    syntax:
        Name of a registered syntax.

    Raises
    ------
    pathnames.engine.InvalidPathFormat
        If ``raw`` contains an invalid name element.
    """

    __slots__ = ("_engine", "_value")

    def __init__(self, raw: str = "", syntax: str = "unix") -> None:
        from pathnames.syntaxes import get_engine

        self._engine: PathEngine = get_engine(syntax)
        self._value: PathValue = self._engine.parse(raw)

    @classmethod
    def from_value(cls, engine: "PathEngine", value: PathValue) -> "PathName":
        """Wrap an existing ``PathValue`` without parsing."""
        path = cls.__new__(cls)
        path._engine = engine
        path._value = value
        return path

    def _coerce(self, other: PathLike) -> PathValue:
        if isinstance(other, PathName):
            if other._engine is not self._engine:
                raise ValueError(
                    f"Cannot combine a {other._engine.name!r} path "
                    f"with a {self._engine.name!r} path"
                )
            return other._value
        if isinstance(other, PathValue):
            return other
        return self._engine.parse(other)

    def _wrap(self, value: PathValue) -> "PathName":
        return PathName.from_value(self._engine, value)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def engine(self) -> "PathEngine":
        return self._engine

    @property
    def value(self) -> PathValue:
        """The underlying ``PathValue``."""
        return self._value

    @property
    def root(self) -> str | None:
        return self._value.root

    @property
    def names(self) -> tuple[str, ...]:
        return self._value.names

    @property
    def name(self) -> str:
        """The final name element, or ``""`` if there is none."""
        return self._value.file_name or ""

    @property
    def parent(self) -> "PathName | None":
        parent = self._value.parent()
        return None if parent is None else self._wrap(parent)

    def is_absolute(self) -> bool:
        return self._engine.is_absolute(self._value)

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def normalize(self) -> "PathName":
        return self._wrap(self._engine.normalize(self._value))

    def resolve(self, other: PathLike) -> "PathName":
        """Resolve ``other`` against this path (no normalization)."""
        return self._wrap(self._engine.resolve(self._value, self._coerce(other)))

    def resolve_sibling(self, other: PathLike) -> "PathName":
        return self._wrap(self._engine.resolve_sibling(self._value, self._coerce(other)))

    def relativize(self, other: PathLike) -> "PathName":
        return self._wrap(self._engine.relativize(self._value, self._coerce(other)))

    def starts_with(self, other: PathLike) -> bool:
        return self._value.starts_with(self._coerce(other))

    def ends_with(self, other: PathLike) -> bool:
        return self._value.ends_with(self._coerce(other))

    def __truediv__(self, other: PathLike) -> "PathName":
        return self.resolve(other)

    # ------------------------------------------------------------------
    # Dunder protocol
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self._engine.to_canonical_string(self._value)

    def __repr__(self) -> str:
        return f"PathName({str(self)!r}, syntax={self._engine.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathName):
            return NotImplemented
        return self._engine is other._engine and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._engine.name, self._value))
