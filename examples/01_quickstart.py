#!/usr/bin/env python3
"""Example: Quickstart: pathnames

Parse paths in two syntaxes, normalize them, resolve one against
another and print the results.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install pathnames
"""
from __future__ import annotations

import pathnames
from pathnames import PathName
from pathnames.engine import UnsupportedRootedRelativePath


def main() -> None:
    print(f"pathnames version: {pathnames.__version__}")

    # Step 1: Parse a path; parsing keeps "." and ".." as they are
    value = pathnames.parse("/srv/www/./site/../static")
    print(f"Parsed: root={value.root!r} names={list(value.names)}")

    # Step 2: Lexically normalize it
    normal = pathnames.normalize(value)
    print(f"Normalized: {pathnames.to_canonical_string(normal)}")

    # Step 3: The same through the pathlib-style wrapper
    logs = (PathName("/srv/www") / "../logs").normalize()
    print(f"Logs dir: {logs}  (sibling: {logs.resolve_sibling('cache')})")
    print(f"From www to logs: {PathName('/srv/www').relativize(logs)}")

    # Step 4: Windows drive-relative paths cannot be resolved lexically
    base = PathName("C:/Users/me", syntax="windows")
    print(f"Windows: {base / 'Documents'}")
    try:
        base / "D:notes"
    except UnsupportedRootedRelativePath as exc:
        print(f"Refused: {exc}")


if __name__ == "__main__":
    main()
