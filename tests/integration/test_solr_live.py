"""Integration tests for SolrEngine against a real Solr instance."""

from __future__ import annotations

from typing import Any, ClassVar

import pytest

from solrscout.engines.solr import SolrEngine
from solrscout.scout.builder import Builder
from solrscout.scout.searchable import Searchable
from solrscout.solr.client import SolrClient

pytestmark = [pytest.mark.integration, pytest.mark.solr]


class Article(Searchable):
    search_index = "posts"
    store: ClassVar[dict[str, Article]] = {}

    def __init__(self, id: int, title: str, status: str) -> None:
        self.id = id
        self.title = title
        self.status = status

    @classmethod
    async def get_scout_models_by_ids(cls, builder: Any, ids: list[Any]) -> list[Article]:
        return [cls.store[str(i)] for i in ids if str(i) in cls.store]


ARTICLES = [
    Article(1, "Advances in Solar Nowcasting Using Deep Learning", "published"),
    Article(2, "Transformer Models for Natural Language Understanding", "published"),
    Article(3, "Federated Learning for Medical Imaging", "draft"),
    Article(4, "Reinforcement Learning for Robotic Manipulation", "published"),
]


@pytest.fixture
async def engine(solr_ready):
    e = SolrEngine(SolrClient(solr_ready, default_endpoint="posts"))
    await e.initialize()
    Article.store = {str(a.id): a for a in ARTICLES}
    await e.update(ARTICLES)
    yield e
    await e.flush(ARTICLES[0])
    await e.shutdown()


class TestSolrLiveIndexing:
    async def test_all_documents_indexed(self, engine: SolrEngine) -> None:
        results = await engine.search(Builder(Article, engine=engine))
        assert engine.get_total_count(results) == len(ARTICLES)

    async def test_delete_removes_documents(self, engine: SolrEngine) -> None:
        await engine.delete(ARTICLES[:2])
        keys = await Builder(Article, engine=engine).keys()
        assert sorted(keys) == ["3", "4"]

    async def test_flush_removes_class(self, engine: SolrEngine) -> None:
        await engine.flush(ARTICLES[0])
        results = await engine.search(Builder(Article, engine=engine))
        assert engine.get_total_count(results) == 0


class TestSolrLiveSearch:
    async def test_where_filters_exact_value(self, engine: SolrEngine) -> None:
        found = await Builder(Article, "learning", engine=engine).where("status", "draft").get()
        assert [a.id for a in found] == [3]

    async def test_paginate_windows_results(self, engine: SolrEngine) -> None:
        builder = Builder(Article, engine=engine).order_by("id", "asc")
        page = await builder.paginate(per_page=2, page=2)
        assert page.total == 4
        assert [a.id for a in page.items] == [3, 4]

    async def test_missing_records_dropped(self, engine: SolrEngine) -> None:
        del Article.store["1"]
        found = await Builder(Article, "solar", engine=engine).get()
        assert found == []
