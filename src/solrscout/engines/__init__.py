"""Search engine drivers.

Built-in engines:
  - solr: Apache Solr via ``SolrClient``
  - null: discards writes, returns no results

Use ``create_engine()`` to build the engine selected in settings.
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from solrscout.scout.exceptions import EngineNotFoundError
from solrscout.scout.registry import EngineRegistry

if TYPE_CHECKING:
    from solrscout.config.settings import Settings
    from solrscout.scout.engine import Engine

logger = logging.getLogger(__name__)

# Maps driver names to (module_path, class_name) for lazy import
_ENGINE_MAP: dict[str, tuple[str, str]] = {
    "solr": ("solrscout.engines.solr", "SolrEngine"),
    "null": ("solrscout.engines.null", "NullEngine"),
}


def _engine_class(driver: str) -> type[Engine]:
    entry = _ENGINE_MAP.get(driver)
    if entry is None:
        raise EngineNotFoundError(
            f"Unknown search driver '{driver}'. Available drivers: {list(_ENGINE_MAP.keys())}"
        )
    module_path, class_name = entry
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def create_engine(settings: Settings) -> Engine:
    """Build the engine named by ``settings.search.driver``.

    Raises:
        EngineNotFoundError: If the driver is unknown.
    """
    driver = settings.search.driver
    engine_class = _engine_class(driver)

    if driver == "solr":
        from solrscout.solr.client import SolrClient

        return engine_class(client=SolrClient.from_settings(settings.search.solr))
    return engine_class()


async def build_registry(settings: Settings) -> EngineRegistry:
    """Create a registry holding the configured engine, initialized.

    The null engine is always registered as a fallback.
    """
    registry = EngineRegistry()
    for driver in _ENGINE_MAP:
        registry.register(driver, _engine_class(driver))

    engine = create_engine(settings)
    await engine.initialize()
    registry.add(engine)
    logger.info("Search driver '%s' active", engine.name)
    return registry
