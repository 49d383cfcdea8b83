"""Engine Registry — Manages registration and retrieval of search engines.

The registry maps driver names to engine classes and keeps the engine
instances created from them, so application code can look up the active
engine by name.
"""

from __future__ import annotations

import logging
from typing import Any

from solrscout.scout.engine import Engine
from solrscout.scout.exceptions import EngineNotFoundError

logger = logging.getLogger(__name__)


class EngineRegistry:
    """Registry for search engine classes and their instances.

    Example:
        >>> registry = EngineRegistry()
        >>> registry.register("solr", SolrEngine)
        >>> await registry.initialize_engine("solr", client=SolrClient(...))
        >>> engine = registry.get("solr")
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[Engine]] = {}
        self._instances: dict[str, Engine] = {}

    def register(self, name: str, engine_class: type[Engine]) -> None:
        """Register an engine class under *name*."""
        if name in self._classes:
            logger.warning("Overwriting existing engine registration: %s", name)
        self._classes[name] = engine_class
        logger.info("Registered engine: %s", name)

    async def initialize_engine(self, name: str, **kwargs: Any) -> Engine:
        """Create and initialize an engine instance.

        Args:
            name: The registered engine name.
            **kwargs: Parameters passed to the engine constructor.

        Raises:
            EngineNotFoundError: If no engine is registered under this name.
        """
        if name not in self._classes:
            raise EngineNotFoundError(
                f"No engine registered with name '{name}'. "
                f"Available engines: {list(self._classes.keys())}"
            )

        engine = self._classes[name](**kwargs)
        await engine.initialize()
        self._instances[name] = engine
        logger.info("Initialized engine: %s", name)
        return engine

    def add(self, engine: Engine) -> None:
        """Track an already-initialized engine under its own name."""
        self._classes.setdefault(engine.name, type(engine))
        self._instances[engine.name] = engine

    def get(self, name: str) -> Engine:
        """Get an initialized engine by name.

        Raises:
            EngineNotFoundError: If the engine is not initialized.
        """
        if name not in self._instances:
            raise EngineNotFoundError(
                f"Engine '{name}' is not initialized. "
                f"Call initialize_engine() first."
            )
        return self._instances[name]

    def get_default(self) -> Engine:
        """Get the first initialized engine."""
        if not self._instances:
            raise EngineNotFoundError("No engines are initialized.")
        return next(iter(self._instances.values()))

    async def shutdown_all(self) -> None:
        """Shut down every initialized engine."""
        for name, engine in self._instances.items():
            try:
                await engine.shutdown()
                logger.info("Shut down engine: %s", name)
            except Exception:
                logger.warning("Error shutting down engine: %s", name, exc_info=True)
        self._instances.clear()

    @property
    def registered_engines(self) -> list[str]:
        return list(self._classes.keys())

    @property
    def active_engines(self) -> list[str]:
        return list(self._instances.keys())
