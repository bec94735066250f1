"""Path model.

Exports the immutable ``PathValue`` node and the serializer for
converting it to and from JSON/YAML.
"""
from __future__ import annotations

from pathnames.model.path_value import PathValue
from pathnames.model.serializer import PathSerializer

__all__ = [
    "PathValue",
    "PathSerializer",
]
