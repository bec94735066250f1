"""Unit tests for pathnames.model.serializer: PathSerializer dict/JSON/YAML."""
from __future__ import annotations

import json

import pytest
import yaml

from pathnames.model.path_value import PathValue
from pathnames.model.serializer import PathSerializer


@pytest.fixture()
def serializer() -> PathSerializer:
    return PathSerializer()


class TestToDict:
    def test_rooted(self, serializer: PathSerializer) -> None:
        assert serializer.to_dict(PathValue("/", ("a", "b"))) == {
            "kind": "PathValue",
            "root": "/",
            "names": ["a", "b"],
        }

    def test_relative_root_is_none(self, serializer: PathSerializer) -> None:
        assert serializer.to_dict(PathValue(None, ("a",)))["root"] is None


class TestFromDict:
    def test_kind_is_optional(self, serializer: PathSerializer) -> None:
        assert serializer.from_dict({"root": "/", "names": ["x"]}) == PathValue("/", ("x",))

    def test_missing_names_is_empty(self, serializer: PathSerializer) -> None:
        assert serializer.from_dict({"kind": "PathValue", "root": None}) == PathValue.empty()

    def test_wrong_kind(self, serializer: PathSerializer) -> None:
        with pytest.raises(ValueError, match="kind"):
            serializer.from_dict({"kind": "DirectoryEntry", "names": []})

    def test_non_string_names(self, serializer: PathSerializer) -> None:
        with pytest.raises(ValueError, match="names"):
            serializer.from_dict({"names": ["a", 1]})

    def test_non_string_root(self, serializer: PathSerializer) -> None:
        with pytest.raises(ValueError, match="root"):
            serializer.from_dict({"root": 3, "names": []})


class TestTextFormats:
    def test_json_is_valid(self, serializer: PathSerializer) -> None:
        text = serializer.to_json(PathValue("/", ("ü",)))
        assert json.loads(text)["names"] == ["ü"]
        assert "ü" in text

    def test_json_round_trip(self, serializer: PathSerializer) -> None:
        value = PathValue("C:\\", ("Users", ".."))
        assert serializer.from_json(serializer.to_json(value)) == value

    def test_yaml_keeps_key_order(self, serializer: PathSerializer) -> None:
        text = serializer.to_yaml(PathValue("/", ("a",)))
        assert text.index("kind") < text.index("root") < text.index("names")
        assert yaml.safe_load(text)["names"] == ["a"]

    def test_yaml_round_trip(self, serializer: PathSerializer) -> None:
        value = PathValue(None, ("..", "a"))
        assert serializer.from_yaml(serializer.to_yaml(value)) == value
