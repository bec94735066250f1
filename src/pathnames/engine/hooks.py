"""Syntax hooks: the only place a path syntax differs from another.

A ``PathSyntaxHooks`` instance bundles the pure functions a ``PathEngine``
calls to split, classify and validate name elements.  Hooks must not keep
state; the same instance is shared by every call made through an engine.

Example
-------
::

    hooks = PathSyntaxHooks(
        split_root_and_rest=lambda raw: (None, raw),
        split_names=lambda rest: [n for n in rest.split(":") if n],
        is_valid_name=bool,
        is_self=lambda name: name == ".",
        is_parent=lambda name: name == "..",
        is_absolute=lambda value: False,
    )
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from pathnames.model.path_value import PathValue


@dataclass(frozen=True)
class PathSyntaxHooks:
    """Syntax-specific decisions delegated to by ``PathEngine``.

    Parameters
    ----------
    split_root_and_rest:
        Split a raw string into its root (``None`` if there is none) and
        a names-only remainder free of leading and trailing separators.
    split_names:
        Split a names-only remainder into name elements, in order.  Empty
        segments are expected to be dropped here.
    is_valid_name:
        Return True if a name element is acceptable in this syntax.
    is_self:
        Return True if a name element means "the current directory".
    is_parent:
        Return True if a name element means "one level up".
    is_absolute:
        Return True if a ``PathValue`` is absolute in this syntax.  Having
        a root does not imply being absolute.
    parent_name:
        The parent token written out by ``PathEngine.relativize``.
    """

    split_root_and_rest: Callable[[str], tuple[str | None, str]]
    split_names: Callable[[str], Sequence[str]]
    is_valid_name: Callable[[str], bool]
    is_self: Callable[[str], bool]
    is_parent: Callable[[str], bool]
    is_absolute: Callable[[PathValue], bool]
    parent_name: str = field(default="..")
