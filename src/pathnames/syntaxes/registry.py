"""Registry of named path syntaxes.

Each syntax is registered as a zero-argument factory returning a
``PathEngine``.  Third-party syntaxes register through this system by
declaring entry-points in their own ``pyproject.toml`` under the
"pathnames.syntaxes" group.

Example
-------
Register a syntax with the decorator::

    from pathnames.syntaxes.registry import syntax_registry

    @syntax_registry.register("colon")
    def create_colon_engine() -> PathEngine:
        return PathEngine(COLON_HOOKS, root_separator="", name_separator=":")

Load all installed syntaxes via entry-points::

    syntax_registry.load_entrypoints("pathnames.syntaxes")

Retrieve an engine by name::

    engine = syntax_registry.create("colon")
"""
from __future__ import annotations

import importlib.metadata
import logging
import threading
from collections.abc import Callable

from pathnames.engine.engine import PathEngine

logger = logging.getLogger(__name__)

EngineFactory = Callable[[], PathEngine]

ENTRYPOINT_GROUP = "pathnames.syntaxes"


class SyntaxNotFoundError(KeyError):
    """Raised when a requested syntax name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.syntax_name = name
        self.available = available
        super().__init__(
            f"Syntax {name!r} is not registered. "
            f"Available syntaxes: {', '.join(available) or '(none)'}. "
            "Check that the package is installed and its entry-points are declared."
        )


class SyntaxAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str) -> None:
        self.syntax_name = name
        super().__init__(
            f"Syntax {name!r} is already registered. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class SyntaxRegistry:
    """Name-to-factory registry for path syntaxes.

    Engines are stateless, so ``create`` builds at most one engine per
    registered name and hands the same instance to every caller.
    """

    def __init__(self) -> None:
        self._factories: dict[str, EngineFactory] = {}
        self._engines: dict[str, PathEngine] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[EngineFactory], EngineFactory]:
        """Return a decorator that registers the decorated engine factory.

        Raises
        ------
        SyntaxAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated object is not callable.
        """

        def decorator(factory: EngineFactory) -> EngineFactory:
            self.register_factory(name, factory)
            return factory

        return decorator

    def register_factory(self, name: str, factory: EngineFactory) -> None:
        """Register ``factory`` under ``name`` without the decorator syntax."""
        if name in self._factories:
            raise SyntaxAlreadyRegisteredError(name)
        if not callable(factory):
            raise TypeError(
                f"Cannot register {factory!r} under {name!r}: it must be callable."
            )
        self._factories[name] = factory
        logger.debug(
            "Registered syntax %r -> %s",
            name,
            getattr(factory, "__qualname__", repr(factory)),
        )

    def deregister(self, name: str) -> None:
        """Remove a syntax and any engine already built for it.

        Raises
        ------
        SyntaxNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._factories:
            raise SyntaxNotFoundError(name, self.list_syntaxes())
        del self._factories[name]
        with self._lock:
            self._engines.pop(name, None)
        logger.debug("Deregistered syntax %r", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> EngineFactory:
        """Return the factory registered under ``name``."""
        try:
            return self._factories[name]
        except KeyError:
            raise SyntaxNotFoundError(name, self.list_syntaxes()) from None

    def create(self, name: str) -> PathEngine:
        """Return the shared engine for ``name``, building it on first use.

        Raises
        ------
        SyntaxNotFoundError
            If no syntax is registered under ``name``.
        TypeError
            If the factory does not return a ``PathEngine``.
        """
        factory = self.get(name)
        with self._lock:
            engine = self._engines.get(name)
            if engine is None:
                engine = factory()
                if not isinstance(engine, PathEngine):
                    raise TypeError(
                        f"Factory for syntax {name!r} returned {engine!r}, "
                        "not a PathEngine."
                    )
                self._engines[name] = engine
                logger.debug("Built engine for syntax %r: %r", name, engine)
        return engine

    def list_syntaxes(self) -> list[str]:
        """Return all registered syntax names in alphabetical order."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"SyntaxRegistry(syntaxes={self.list_syntaxes()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register syntaxes declared as package entry-points.

        Names that are already registered are skipped, which makes
        repeated calls idempotent.  An entry-point that fails to import is
        logged and skipped.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."pathnames.syntaxes"]
            colon = "my_package.colon:create_colon_engine"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._factories:
                logger.debug("Entry-point %r already registered; skipping.", ep.name)
                continue
            try:
                factory = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_factory(ep.name, factory)
            except (SyntaxAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered; skipping.",
                    ep.name,
                )


syntax_registry = SyntaxRegistry()
