"""Tests for the null engine."""

from __future__ import annotations

from solrscout.engines.null import NullEngine
from solrscout.scout.builder import Builder
from solrscout.scout.registry import EngineRegistry


class TestNullEngine:
    async def test_everything_is_empty(self, post_model, posts) -> None:
        engine = NullEngine()
        builder = Builder(post_model, "solar", engine=engine)

        await engine.update(posts)
        await engine.delete(posts)
        await engine.flush(posts[0])

        results = await engine.search(builder)
        assert engine.map_ids(results) == []
        assert engine.get_total_count(results) == 0
        assert await engine.map(builder, results, post_model) == []
        assert await builder.get() == []
        assert engine.get_total_count(await engine.paginate(builder, 10, 1)) == 0

    def test_name(self) -> None:
        assert NullEngine().name == "null"

    def test_holds_no_state(self) -> None:
        assert vars(NullEngine()) == {}

    async def test_built_through_registry(self) -> None:
        registry = EngineRegistry()
        registry.register("null", NullEngine)
        engine = await registry.initialize_engine("null")
        assert isinstance(engine, NullEngine)
        assert registry.get_default() is engine
