"""Unix path syntax.

Root ``/``, names separated by ``/``.  Runs of separators and trailing
separators are dropped while splitting, so ``//usr///lib/`` parses like
``/usr/lib``.  A name may contain anything but ``/`` and NUL.
"""
from __future__ import annotations

from pathnames.engine.engine import PathEngine
from pathnames.engine.hooks import PathSyntaxHooks
from pathnames.model.path_value import PathValue

SEPARATOR = "/"
ROOT = "/"
SELF_NAME = "."
PARENT_NAME = ".."


def split_root_and_rest(raw: str) -> tuple[str | None, str]:
    if raw.startswith(SEPARATOR):
        return ROOT, raw.strip(SEPARATOR)
    return None, raw.rstrip(SEPARATOR)


def split_names(rest: str) -> list[str]:
    return [name for name in rest.split(SEPARATOR) if name]


def is_valid_name(name: str) -> bool:
    return bool(name) and SEPARATOR not in name and "\0" not in name


def is_absolute(value: PathValue) -> bool:
    return value.root is not None


UNIX_HOOKS = PathSyntaxHooks(
    split_root_and_rest=split_root_and_rest,
    split_names=split_names,
    is_valid_name=is_valid_name,
    is_self=lambda name: name == SELF_NAME,
    is_parent=lambda name: name == PARENT_NAME,
    is_absolute=is_absolute,
    parent_name=PARENT_NAME,
)


def create_unix_engine() -> PathEngine:
    """Return a ``PathEngine`` for Unix paths."""
    return PathEngine(UNIX_HOOKS, root_separator="", name_separator=SEPARATOR, name="unix")
