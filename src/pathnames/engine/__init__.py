"""Path engine module.

Exports the ``PathEngine`` class, the ``PathSyntaxHooks`` parameter
object, and the engine's error types.
"""
from __future__ import annotations

from pathnames.engine.engine import PathEngine
from pathnames.engine.errors import (
    IncompatibleRootsError,
    InvalidPathFormat,
    PathError,
    UnsupportedRootedRelativePath,
)
from pathnames.engine.hooks import PathSyntaxHooks

__all__ = [
    "PathEngine",
    "PathSyntaxHooks",
    "PathError",
    "InvalidPathFormat",
    "UnsupportedRootedRelativePath",
    "IncompatibleRootsError",
]
