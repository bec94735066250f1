"""Serialization of ``PathValue`` objects to and from JSON and YAML.

The serialized form is a plain dict that maps naturally to both formats::

    {"kind": "PathValue", "root": "/", "names": ["usr", "lib"]}

Usage
-----
::

    from pathnames.model.serializer import PathSerializer

    serializer = PathSerializer()
    text = serializer.to_json(value)
    assert serializer.from_json(text) == value
"""
from __future__ import annotations

import json

import yaml

from pathnames.model.path_value import PathValue

_KIND = "PathValue"


class PathSerializer:
    """Converts between ``PathValue`` objects and plain Python dicts."""

    def to_dict(self, value: PathValue) -> dict[str, object]:
        """Serialize a ``PathValue`` to a JSON-compatible dict."""
        return {
            "kind": _KIND,
            "root": value.root,
            "names": list(value.names),
        }

    def from_dict(self, data: dict[str, object]) -> PathValue:
        """Deserialize a ``PathValue`` from a plain dict.

        Raises
        ------
        ValueError
            If the dict is not a serialized ``PathValue``.
        """
        kind = data.get("kind", _KIND)
        if kind != _KIND:
            raise ValueError(f"Expected kind {_KIND!r}, got {kind!r}")
        root = data.get("root")
        if root is not None and not isinstance(root, str):
            raise ValueError(f"root must be a string or null, got {root!r}")
        names = data.get("names") or []
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValueError(f"names must be a list of strings, got {names!r}")
        return PathValue(root, tuple(names))

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, value: PathValue, indent: int = 2) -> str:
        """Serialize a ``PathValue`` to a JSON string."""
        return json.dumps(self.to_dict(value), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> PathValue:
        """Deserialize a ``PathValue`` from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, value: PathValue) -> str:
        """Serialize a ``PathValue`` to a YAML string."""
        return yaml.dump(
            self.to_dict(value),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def from_yaml(self, text: str) -> PathValue:
        """Deserialize a ``PathValue`` from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
