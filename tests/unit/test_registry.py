"""Unit tests for pathnames.syntaxes.registry: SyntaxRegistry, error types
and entry-point loading.
"""
from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from pathnames.engine.engine import PathEngine
from pathnames.syntaxes import get_engine, syntax_registry
from pathnames.syntaxes.registry import (
    SyntaxAlreadyRegisteredError,
    SyntaxNotFoundError,
    SyntaxRegistry,
)
from pathnames.syntaxes.unix import create_unix_engine


def _make_entry_point(name: str, loaded: object = None, error: Exception | None = None) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = loaded
    return ep


class TestErrors:
    def test_not_found_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise SyntaxNotFoundError("dos", ["unix"])

    def test_not_found_lists_available(self) -> None:
        error = SyntaxNotFoundError("dos", ["unix", "windows"])
        assert error.syntax_name == "dos"
        assert "unix, windows" in str(error)

    def test_already_registered_is_value_error(self) -> None:
        error = SyntaxAlreadyRegisteredError("unix")
        assert isinstance(error, ValueError)
        assert error.syntax_name == "unix"


class TestRegistration:
    def test_empty_registry(self) -> None:
        registry = SyntaxRegistry()
        assert len(registry) == 0
        assert registry.list_syntaxes() == []

    def test_decorator_returns_factory(self) -> None:
        registry = SyntaxRegistry()

        @registry.register("posix")
        def factory() -> PathEngine:
            return create_unix_engine()

        assert registry.get("posix") is factory
        assert "posix" in registry

    def test_duplicate_name_rejected(self) -> None:
        registry = SyntaxRegistry()
        registry.register_factory("posix", create_unix_engine)
        with pytest.raises(SyntaxAlreadyRegisteredError):
            registry.register_factory("posix", create_unix_engine)

    def test_non_callable_rejected(self) -> None:
        registry = SyntaxRegistry()
        with pytest.raises(TypeError):
            registry.register_factory("posix", "not callable")  # type: ignore[arg-type]

    def test_deregister(self) -> None:
        registry = SyntaxRegistry()
        registry.register_factory("posix", create_unix_engine)
        registry.create("posix")
        registry.deregister("posix")
        assert "posix" not in registry

    def test_deregister_unknown(self) -> None:
        with pytest.raises(SyntaxNotFoundError):
            SyntaxRegistry().deregister("posix")

    def test_list_sorted(self) -> None:
        registry = SyntaxRegistry()
        registry.register_factory("b", create_unix_engine)
        registry.register_factory("a", create_unix_engine)
        assert registry.list_syntaxes() == ["a", "b"]

    def test_repr(self) -> None:
        registry = SyntaxRegistry()
        registry.register_factory("posix", create_unix_engine)
        assert "posix" in repr(registry)


class TestCreate:
    def test_create_memoises_engine(self) -> None:
        registry = SyntaxRegistry()
        factory = MagicMock(side_effect=create_unix_engine)
        registry.register_factory("posix", factory)
        assert registry.create("posix") is registry.create("posix")
        factory.assert_called_once_with()

    def test_create_unknown(self) -> None:
        with pytest.raises(SyntaxNotFoundError):
            SyntaxRegistry().create("posix")

    def test_factory_must_return_engine(self) -> None:
        registry = SyntaxRegistry()
        registry.register_factory("broken", lambda: object())  # type: ignore[arg-type,return-value]
        with pytest.raises(TypeError):
            registry.create("broken")


class TestBuiltins:
    def test_unix_and_windows_registered(self) -> None:
        assert "unix" in syntax_registry
        assert "windows" in syntax_registry

    def test_get_engine(self) -> None:
        assert get_engine("windows").name == "windows"
        assert get_engine() is get_engine("unix")


class TestLoadEntrypoints:
    def test_registers_loaded_factory(self) -> None:
        registry = SyntaxRegistry()
        ep = _make_entry_point("posix", loaded=create_unix_engine)
        with patch("importlib.metadata.entry_points", return_value=[ep]) as mock_eps:
            registry.load_entrypoints()
        mock_eps.assert_called_once_with(group="pathnames.syntaxes")
        assert registry.get("posix") is create_unix_engine

    def test_skips_already_registered(self) -> None:
        registry = SyntaxRegistry()
        registry.register_factory("posix", create_unix_engine)
        ep = _make_entry_point("posix", loaded=create_unix_engine)
        with patch("importlib.metadata.entry_points", return_value=[ep]):
            registry.load_entrypoints()
        ep.load.assert_not_called()

    def test_load_failure_is_logged_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = SyntaxRegistry()
        ep = _make_entry_point("broken", error=ImportError("missing module"))
        with patch("importlib.metadata.entry_points", return_value=[ep]):
            with caplog.at_level(logging.ERROR, logger="pathnames.syntaxes.registry"):
                registry.load_entrypoints()
        assert "broken" not in registry
        assert "broken" in caplog.text

    def test_non_callable_is_skipped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = SyntaxRegistry()
        ep = _make_entry_point("odd", loaded=42)
        with patch("importlib.metadata.entry_points", return_value=[ep]):
            with caplog.at_level(logging.WARNING, logger="pathnames.syntaxes.registry"):
                registry.load_entrypoints()
        assert "odd" not in registry
        assert "odd" in caplog.text
