"""Error types raised by the path engine.

Every error the engine raises itself derives from ``PathError``.  Errors
raised by hook functions are not wrapped and reach the caller unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from pathnames.model.path_value import PathValue


class PathError(Exception):
    """Base class for errors raised by ``PathEngine`` operations."""


@dataclass(frozen=True)
class InvalidPathFormat(PathError, ValueError):
    """A name element of the input failed the syntax's validity check.

    Parameters
    ----------
    path:
        The complete original input string.
    name:
        The first invalid name element, in scan order.
    reason:
        Optional extra detail for display.
    """

    path: str
    name: str
    reason: str = field(default="invalid path element")

    def __str__(self) -> str:
        return f"{self.path!r}: {self.reason}: {self.name!r}"

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (str(self),))


class UnsupportedRootedRelativePath(PathError):
    """``resolve`` was given a rooted operand that is not absolute.

    Such a path (for instance the drive-relative ``C:foo`` on Windows)
    cannot be resolved against another path by a purely lexical engine.
    """

    def __init__(self, base: PathValue, other: PathValue) -> None:
        self.base = base
        self.other = other
        super().__init__(
            f"Cannot resolve {other!r} against {base!r}: "
            f"it has root {other.root!r} but is not absolute."
        )


class IncompatibleRootsError(PathError, ValueError):
    """``relativize`` was given two paths whose roots differ."""

    def __init__(self, base: PathValue, other: PathValue) -> None:
        self.base = base
        self.other = other
        super().__init__(
            f"Cannot relativize {other!r} against {base!r}: "
            f"roots {base.root!r} and {other.root!r} differ."
        )
