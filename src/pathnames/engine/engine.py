"""Syntax-agnostic path algorithms.

``PathEngine`` implements parsing, lexical normalization, resolution and
restringification over ``PathValue`` objects.  Everything that depends on
a concrete path grammar is delegated to a ``PathSyntaxHooks`` instance
given at construction, so one engine class serves Unix, Windows or any
other syntax.

Engines hold only immutable configuration and may be shared between
threads without locking.

Usage
-----
::

    from pathnames.syntaxes.unix import create_unix_engine

    engine = create_unix_engine()
    value = engine.parse("/usr/lib/../bin")
    engine.to_canonical_string(engine.normalize(value))  # '/usr/bin'
"""
from __future__ import annotations

import logging

from pathnames.engine.errors import (
    IncompatibleRootsError,
    InvalidPathFormat,
    UnsupportedRootedRelativePath,
)
from pathnames.engine.hooks import PathSyntaxHooks
from pathnames.model.path_value import PathValue

logger = logging.getLogger(__name__)


class PathEngine:
    """Path algorithms for a single path syntax.

    Parameters
    ----------
    hooks:
        The syntax-specific split, validity and classification functions.
    root_separator:
        Written between the root and the first name when both exist.
    name_separator:
        Written between two consecutive names.
    name:
        A label for this syntax, used in ``repr`` and log messages.
    """

    __slots__ = ("_hooks", "_root_separator", "_name_separator", "_name")

    def __init__(
        self,
        hooks: PathSyntaxHooks,
        root_separator: str,
        name_separator: str,
        name: str = "custom",
    ) -> None:
        self._hooks = hooks
        self._root_separator = root_separator
        self._name_separator = name_separator
        self._name = name

    @property
    def hooks(self) -> PathSyntaxHooks:
        return self._hooks

    @property
    def root_separator(self) -> str:
        return self._root_separator

    @property
    def name_separator(self) -> str:
        return self._name_separator

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return (
            f"PathEngine(name={self._name!r}, "
            f"root_separator={self._root_separator!r}, "
            f"name_separator={self._name_separator!r})"
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, raw: str) -> PathValue:
        """Convert a raw path string into a ``PathValue``.

        The result is not normalized: self and parent names are kept.

        Raises
        ------
        InvalidPathFormat
            On the first name element rejected by ``is_valid_name``.
        """
        root, rest = self._hooks.split_root_and_rest(raw)
        names = tuple(self._hooks.split_names(rest))

        for name in names:
            if not self._hooks.is_valid_name(name):
                logger.debug("Rejected name %r in %r (%s syntax)", name, raw, self._name)
                raise InvalidPathFormat(raw, name)

        return PathValue(root, names)

    def is_absolute(self, path: PathValue) -> bool:
        """Return True if ``path`` is absolute in this syntax."""
        return self._hooks.is_absolute(path)

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def normalize(self, path: PathValue) -> PathValue:
        """Lexically remove self names and collapse parent names.

        A parent name cancels the last kept name once any regular name
        has been seen in this call; before that it is kept, which is how
        leading ``..`` elements survive.  The "regular name seen" state is
        never reset, so ``../a/../..`` normalizes to the empty path.
        """
        is_self = self._hooks.is_self
        is_parent = self._hooks.is_parent

        kept: list[str] = []
        seen_regular_name = False

        for name in path.names:
            if is_self(name):
                continue
            if not is_parent(name):
                kept.append(name)
                seen_regular_name = True
                continue
            if seen_regular_name and kept:
                kept.pop()
            else:
                kept.append(name)

        return PathValue(path.root, tuple(kept))

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, base: PathValue, other: PathValue) -> PathValue:
        """Resolve ``other`` against ``base``.

        An absolute ``other`` is returned as is.  Otherwise the names of
        ``other`` are appended to those of ``base``, keeping the root of
        ``base``; nothing is normalized.

        Raises
        ------
        UnsupportedRootedRelativePath
            If ``other`` has a root but is not absolute.
        """
        if self._hooks.is_absolute(other):
            return other

        if other.root is not None:
            raise UnsupportedRootedRelativePath(base, other)

        if not other.names:
            return base

        return PathValue(base.root, base.names + other.names)

    def resolve_sibling(self, base: PathValue, other: PathValue) -> PathValue:
        """Resolve ``other`` against the parent of ``base``.

        If ``base`` has no parent, ``other`` is returned unchanged.
        """
        parent = base.parent()
        if parent is None:
            return other
        return self.resolve(parent, other)

    def relativize(self, base: PathValue, other: PathValue) -> PathValue:
        """Build a relative path that leads from ``base`` to ``other``.

        For normalized operands with equal roots,
        ``resolve(base, relativize(base, other))`` normalizes to ``other``.

        Raises
        ------
        IncompatibleRootsError
            If the roots of ``base`` and ``other`` differ.
        """
        if base.root != other.root:
            raise IncompatibleRootsError(base, other)

        common = 0
        for left, right in zip(base.names, other.names):
            if left != right:
                break
            common += 1

        ups = (self._hooks.parent_name,) * (len(base.names) - common)
        return PathValue(None, ups + other.names[common:])

    # ------------------------------------------------------------------
    # Restringification
    # ------------------------------------------------------------------

    def to_canonical_string(self, path: PathValue) -> str:
        """Return the printable form of ``path`` in this syntax.

        This never fails, and never normalizes.
        """
        parts: list[str] = []
        if path.root is not None:
            parts.append(path.root)
        if not path.names:
            return "".join(parts)
        if path.root is not None:
            parts.append(self._root_separator)
        parts.append(self._name_separator.join(path.names))
        return "".join(parts)
