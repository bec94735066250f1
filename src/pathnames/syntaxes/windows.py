r"""Windows path syntax.

Both ``\`` and ``/`` are accepted as separators on input; ``\`` is used
on output.  Four kinds of root are recognised:

- ``C:\dir`` has root ``C:\`` and is absolute;
- ``\\server\share\dir`` has root ``\\server\share\`` and is absolute;
- ``C:dir`` has root ``C:`` and is drive-relative, not absolute;
- ``\dir`` has root ``\`` and is relative to the current drive.

Drive letters are upper-cased.  Rooted but non-absolute paths cannot be
resolved against another path; see ``UnsupportedRootedRelativePath``.
"""
from __future__ import annotations

import re

from pathnames.engine.engine import PathEngine
from pathnames.engine.errors import InvalidPathFormat
from pathnames.engine.hooks import PathSyntaxHooks
from pathnames.model.path_value import PathValue

SEPARATOR = "\\"
SELF_NAME = "."
PARENT_NAME = ".."

_DRIVE_RE = re.compile(r"^([A-Za-z]):")
_RESERVED_CHARS = frozenset('<>:"/\\|?*')


def split_root_and_rest(raw: str) -> tuple[str | None, str]:
    """Split a Windows path into its root and names-only remainder.

    Raises
    ------
    InvalidPathFormat
        If a UNC prefix lacks its server or share name.
    """
    text = raw.replace("/", SEPARATOR)

    if text.startswith(SEPARATOR * 2):
        parts = text[2:].split(SEPARATOR, 2)
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise InvalidPathFormat(raw, text, "incomplete UNC root")
        rest = parts[2] if len(parts) > 2 else ""
        return f"{SEPARATOR * 2}{parts[0]}{SEPARATOR}{parts[1]}{SEPARATOR}", rest.strip(SEPARATOR)

    match = _DRIVE_RE.match(text)
    if match:
        drive = match.group(1).upper() + ":"
        rest = text[2:]
        if rest.startswith(SEPARATOR):
            return drive + SEPARATOR, rest.strip(SEPARATOR)
        return drive, rest.rstrip(SEPARATOR)

    if text.startswith(SEPARATOR):
        return SEPARATOR, text.strip(SEPARATOR)
    return None, text.rstrip(SEPARATOR)


def split_names(rest: str) -> list[str]:
    return [name for name in rest.split(SEPARATOR) if name]


def is_valid_name(name: str) -> bool:
    if name in (SELF_NAME, PARENT_NAME):
        return True
    if not name or name[-1] in " .":
        return False
    return not any(ch in _RESERVED_CHARS or ord(ch) < 32 for ch in name)


def is_absolute(value: PathValue) -> bool:
    # "C:\" and "\\server\share\" are absolute; "C:" and "\" are not
    root = value.root
    return root is not None and root != SEPARATOR and root.endswith(SEPARATOR)


WINDOWS_HOOKS = PathSyntaxHooks(
    split_root_and_rest=split_root_and_rest,
    split_names=split_names,
    is_valid_name=is_valid_name,
    is_self=lambda name: name == SELF_NAME,
    is_parent=lambda name: name == PARENT_NAME,
    is_absolute=is_absolute,
    parent_name=PARENT_NAME,
)


def create_windows_engine() -> PathEngine:
    """Return a ``PathEngine`` for Windows paths."""
    return PathEngine(
        WINDOWS_HOOKS, root_separator="", name_separator=SEPARATOR, name="windows"
    )
