"""Tests for the engine registry."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from solrscout.engines.null import NullEngine
from solrscout.engines.solr import SolrEngine
from solrscout.scout.exceptions import EngineNotFoundError
from solrscout.scout.registry import EngineRegistry


@pytest.fixture
def registry() -> EngineRegistry:
    return EngineRegistry()


class TestEngineRegistry:
    def test_register(self, registry: EngineRegistry) -> None:
        registry.register("null", NullEngine)
        assert registry.registered_engines == ["null"]
        assert registry.active_engines == []

    async def test_initialize_and_get(self, registry: EngineRegistry) -> None:
        registry.register("null", NullEngine)
        engine = await registry.initialize_engine("null")
        assert registry.get("null") is engine
        assert registry.get_default() is engine
        assert registry.active_engines == ["null"]

    async def test_initialize_passes_kwargs(self, registry: EngineRegistry, mock_client) -> None:
        registry.register("solr", SolrEngine)
        engine = await registry.initialize_engine("solr", client=mock_client)
        assert isinstance(engine, SolrEngine)
        assert engine.client is mock_client

    async def test_initialize_unknown(self, registry: EngineRegistry) -> None:
        with pytest.raises(EngineNotFoundError, match="No engine registered"):
            await registry.initialize_engine("elastic")

    def test_get_uninitialized(self, registry: EngineRegistry) -> None:
        registry.register("null", NullEngine)
        with pytest.raises(EngineNotFoundError, match="not initialized"):
            registry.get("null")

    def test_get_default_empty(self, registry: EngineRegistry) -> None:
        with pytest.raises(EngineNotFoundError):
            registry.get_default()

    def test_add_instance(self, registry: EngineRegistry) -> None:
        engine = NullEngine()
        registry.add(engine)
        assert registry.get("null") is engine
        assert "null" in registry.registered_engines

    async def test_shutdown_all(self, registry: EngineRegistry, mock_client) -> None:
        registry.add(SolrEngine(mock_client))
        registry.add(NullEngine())
        await registry.shutdown_all()
        mock_client.close.assert_awaited_once()
        assert registry.active_engines == []

    async def test_shutdown_all_survives_errors(self, registry: EngineRegistry) -> None:
        broken = NullEngine()
        broken.shutdown = AsyncMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]
        registry.add(broken)
        await registry.shutdown_all()
        assert registry.active_engines == []
