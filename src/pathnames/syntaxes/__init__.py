"""Built-in path syntaxes.

Importing this package registers the ``unix`` and ``windows`` syntaxes in
the shared ``syntax_registry``.
"""
from __future__ import annotations

from pathnames.engine.engine import PathEngine
from pathnames.syntaxes.registry import (
    SyntaxAlreadyRegisteredError,
    SyntaxNotFoundError,
    SyntaxRegistry,
    syntax_registry,
)
from pathnames.syntaxes.unix import create_unix_engine
from pathnames.syntaxes.windows import create_windows_engine

syntax_registry.register_factory("unix", create_unix_engine)
syntax_registry.register_factory("windows", create_windows_engine)


def get_engine(syntax: str = "unix") -> PathEngine:
    """Return the shared engine registered under ``syntax``."""
    return syntax_registry.create(syntax)


__all__ = [
    "SyntaxRegistry",
    "SyntaxNotFoundError",
    "SyntaxAlreadyRegisteredError",
    "syntax_registry",
    "get_engine",
    "create_unix_engine",
    "create_windows_engine",
]
