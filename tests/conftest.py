"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any, ClassVar
from unittest.mock import AsyncMock, MagicMock

import pytest

from solrscout.config.settings import Settings
from solrscout.scout.searchable import Searchable
from solrscout.solr.client import SolrClient
from solrscout.solr.query import SelectQuery, UpdateQuery
from solrscout.solr.result import SelectResult

# ── Searchable models ───────────────────────────────────────────────────────


class Post(Searchable):
    """In-memory searchable model; ``store`` plays the database."""

    search_index = "posts"
    store: ClassVar[dict[str, Post]] = {}

    def __init__(self, id: Any, title: str | None = None, status: str | None = None) -> None:
        self.id = id
        self.title = title
        self.status = status

    @classmethod
    async def get_scout_models_by_ids(cls, builder: Any, ids: list[Any]) -> list[Post]:
        return [cls.store[str(i)] for i in ids if str(i) in cls.store]

    def __repr__(self) -> str:
        return f"Post(id={self.id!r})"


class Comment(Searchable):
    """Model keyed by ``key`` whose searchable array carries an explicit null id."""

    scout_key_name = "key"

    def __init__(self, key: Any, name: str) -> None:
        self.key = key
        self.name = name

    def to_searchable_array(self) -> dict[str, Any]:
        return {"id": None, "key": self.key, "name": self.name}

    @classmethod
    async def get_scout_models_by_ids(cls, builder: Any, ids: list[Any]) -> list[Comment]:
        return []


@pytest.fixture(autouse=True)
def _clear_post_store():
    Post.store.clear()
    yield
    Post.store.clear()


@pytest.fixture
def posts() -> list[Post]:
    """Three posts, all present in the backing store."""
    items = [
        Post(1, title="Solar nowcasting", status="published"),
        Post(2, title="Wind forecasting", status="draft"),
        Post(3, title="Grid storage", status="published"),
    ]
    for p in items:
        Post.store[str(p.id)] = p
    return items


# ── Solr client ─────────────────────────────────────────────────────────────


@pytest.fixture
def select_result() -> SelectResult:
    return SelectResult(documents=[], num_found=0)


@pytest.fixture
def mock_client(select_result: SelectResult) -> MagicMock:
    """A ``SolrClient`` stand-in that builds real queries but sends nothing."""
    client = MagicMock(spec=SolrClient)
    client.base_url = "http://localhost:8983/solr"
    client.default_endpoint = "collection1"
    client.create_update.side_effect = UpdateQuery
    client.create_select.side_effect = SelectQuery
    client.update = AsyncMock(return_value={"responseHeader": {"status": 0}})
    client.select = AsyncMock(return_value=select_result)
    client.close = AsyncMock()
    return client


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        search={"driver": "solr", "solr": {"base_url": "http://solr.test:8983/solr", "default_endpoint": "posts"}},
    )


@pytest.fixture
def post_model() -> type[Post]:
    return Post


@pytest.fixture
def comment_model() -> type[Comment]:
    return Comment
