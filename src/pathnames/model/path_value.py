"""The ``PathValue`` node: a parsed path as a root plus name elements.

A ``PathValue`` is a frozen dataclass so that parsed paths are immutable
and hashable and may be shared freely.  It knows nothing about any path
syntax: separators, self/parent tokens and absoluteness are decided by the
``PathEngine`` that produced it.

No normalization happens at construction; ``PathValue("/", ("a", ".."))``
and ``PathValue("/", ())`` are different values.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PathValue:
    """A root component (possibly absent) and an ordered tuple of names.

    Parameters
    ----------
    root:
        Syntax-specific root marker such as ``"/"`` or ``"C:\\"``, or
        ``None`` for a path with no root.
    names:
        Name elements in path order.  Any iterable is accepted and stored
        as a tuple.
    """

    root: str | None = None
    names: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.names, tuple):
            object.__setattr__(self, "names", tuple(self.names))

    def __repr__(self) -> str:
        return f"PathValue(root={self.root!r}, names={list(self.names)!r})"

    @classmethod
    def empty(cls) -> "PathValue":
        """Return the value with neither a root nor names."""
        return cls(None, ())

    @classmethod
    def relative(cls, names: Iterable[str]) -> "PathValue":
        """Return a root-less value made of ``names``."""
        return cls(None, tuple(names))

    # ------------------------------------------------------------------
    # Structural accessors
    # ------------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        """Return True if there is no root and no names."""
        return self.root is None and not self.names

    @property
    def name_count(self) -> int:
        return len(self.names)

    @property
    def file_name(self) -> str | None:
        """Return the last name element, or ``None`` if there are none."""
        return self.names[-1] if self.names else None

    def parent(self) -> "PathValue | None":
        """Return this value minus its last name, keeping the root.

        Returns ``None`` when there are no names to drop.  Note that the
        parent of a single-name relative path is the empty value, not
        ``None``.
        """
        if not self.names:
            return None
        return PathValue(self.root, self.names[:-1])

    def get_name(self, index: int) -> str:
        """Return the name element at ``index`` (0 is closest to the root).

        Raises
        ------
        IndexError
            If ``index`` is negative or not below ``name_count``.
        """
        if index < 0 or index >= len(self.names):
            raise IndexError(
                f"name index {index} out of range for {len(self.names)} name(s)"
            )
        return self.names[index]

    def subpath(self, begin: int, end: int) -> "PathValue":
        """Return the relative value made of ``names[begin:end]``.

        Raises
        ------
        IndexError
            If the range is empty or falls outside the name elements.
        """
        if begin < 0 or end > len(self.names) or begin >= end:
            raise IndexError(
                f"invalid subpath range [{begin}, {end}) "
                f"for {len(self.names)} name(s)"
            )
        return PathValue(None, self.names[begin:end])

    def starts_with(self, other: "PathValue") -> bool:
        """Return True if ``other`` has the same root and is a name prefix."""
        if self.root != other.root:
            return False
        count = len(other.names)
        return count <= len(self.names) and self.names[:count] == other.names

    def ends_with(self, other: "PathValue") -> bool:
        """Return True if ``other`` is a trailing part of this value.

        A rooted ``other`` only matches the whole value.
        """
        if other.root is not None:
            return self == other
        count = len(other.names)
        if count > len(self.names):
            return False
        return count == 0 or self.names[-count:] == other.names
