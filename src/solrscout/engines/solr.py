"""Apache Solr engine — Search engine driver backed by ``SolrClient``.

Translates engine calls into Solr update and select requests:

  - models become documents tagged with ``id`` and ``_class``
  - builder ``where`` clauses become keyed filter queries (``field:"value"``)
  - select results map back to models in Solr's relevance order

Usage::

    client = SolrClient("http://localhost:8983/solr", default_endpoint="posts")
    engine = SolrEngine(client)
    await engine.update(posts)
    hits = await Builder(Post, "solar", engine=engine).where("status", "published").get()
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from solrscout.scout.builder import Builder
from solrscout.scout.engine import Engine
from solrscout.scout.searchable import Searchable, class_name
from solrscout.solr.client import SolrClient
from solrscout.solr.query import MATCH_ALL, SelectQuery
from solrscout.solr.result import SelectResult

logger = logging.getLogger(__name__)

CLASS_FIELD = "_class"


class SolrEngine(Engine):
    """Search engine driver for Apache Solr.

    Every call performs at most one request through the injected client.
    Errors raised by the client (``SolrError`` subclasses) propagate
    unchanged.

    Args:
        client: The Solr client used for all requests.
    """

    def __init__(self, client: SolrClient) -> None:
        self._client = client

    @property
    def name(self) -> str:
        return "solr"

    @property
    def client(self) -> SolrClient:
        return self._client

    async def initialize(self) -> None:
        logger.info(
            "Solr engine ready at %s (default endpoint '%s')",
            self._client.base_url,
            self._client.default_endpoint,
        )

    async def shutdown(self) -> None:
        """Close the Solr client."""
        await self._client.close()

    # ── Indexing ─────────────────────────────────────────────────────────

    async def update(self, models: Sequence[Searchable]) -> None:
        """Index the given models in one committed batch.

        All models are sent to the first model's index.
        """
        if not models:
            return

        query = self._client.create_update()
        for model in models:
            attrs = {k: v for k, v in model.to_searchable_array().items() if v is not None}

            # Without an id Solr would create a new document on every update.
            if "id" not in attrs:
                attrs["id"] = model.get_scout_key()

            # Tag the owning type so flush() can find the model's documents.
            attrs[CLASS_FIELD] = class_name(model)

            query.add_document(query.create_document(attrs))

        query.add_commit()

        endpoint = models[0].searchable_as()
        logger.debug("Indexing %d document(s) into '%s'", len(models), endpoint)
        await self._client.update(query, endpoint)

    async def delete(self, models: Sequence[Searchable]) -> None:
        """Remove the given models from the first model's index."""
        if not models:
            return

        ids = [model.get_scout_key() for model in models]

        query = self._client.create_update()
        query.add_delete_by_ids(ids)
        query.add_commit()

        endpoint = models[0].searchable_as()
        logger.debug("Deleting %d document(s) from '%s'", len(ids), endpoint)
        await self._client.update(query, endpoint)

    async def flush(self, model: Any) -> None:
        """Delete every document tagged with the model's type from its index.

        Only model instances are accepted; anything else is ignored.
        """
        if not isinstance(model, Searchable):
            return

        query = self._client.create_update()
        query.add_delete_query(f"{CLASS_FIELD}:{quote(class_name(model))}")
        query.add_commit()
        endpoint = model.searchable_as()
        logger.debug("Flushing all '%s' documents from '%s'", class_name(model), endpoint)
        await self._client.update(query, endpoint)

    # ── Searching ────────────────────────────────────────────────────────

    async def search(self, builder: Builder) -> Any:
        return await self._perform_search(builder)

    async def paginate(self, builder: Builder, per_page: int, page: int) -> Any:
        offset = (page - 1) * per_page
        return await self._perform_search(builder, per_page=per_page, offset=offset)

    async def _perform_search(
        self,
        builder: Builder,
        per_page: int | None = None,
        offset: int | None = None,
    ) -> Any:
        select = self._client.create_select()

        conditions = [builder.query] if builder.query else []
        self._filters(select, builder)

        if conditions:
            select.set_query(" ".join(conditions))

        for field, direction in builder.orders:
            select.add_sort(field, direction)

        if per_page is not None:
            select.set_start(offset or 0).set_rows(per_page)
        elif builder.limit is not None:
            select.set_rows(builder.limit)

        if builder.callback is not None:
            return await builder.callback(self._client, select)

        return await self._client.select(select, self._endpoint(builder))

    @staticmethod
    def _filters(select: SelectQuery, builder: Builder) -> None:
        """Attach one filter query per builder constraint."""
        for field, value in builder.wheres.items():
            select.create_filter_query(field).set_query(f"{field}:{quote(value)}")

        for field, values in builder.where_ins.items():
            key = f"{field}__in"
            if not values:
                select.create_filter_query(key).set_query(f"-{MATCH_ALL}")
                continue
            options = " OR ".join(quote(v) for v in values)
            select.create_filter_query(key).set_query(f"{field}:({options})")

    @staticmethod
    def _endpoint(builder: Builder) -> str | None:
        if builder.index:
            return builder.index
        index_name = getattr(builder.model, "index_name", None)
        return index_name() if callable(index_name) else None

    # ── Result mapping ───────────────────────────────────────────────────

    def map_ids(self, results: SelectResult) -> list[Any]:
        return [document["id"] for document in results.documents]

    async def map(self, builder: Builder, results: SelectResult, model: Any) -> list[Any]:
        """Map Solr documents to models, keeping Solr's order.

        Documents whose id has no matching model are dropped.
        """
        if not results.documents:
            return []

        found = await model.get_scout_models_by_ids(builder, self.map_ids(results))
        # Solr returns ids as strings; compare keys the same way.
        by_key = {str(m.get_scout_key()): m for m in found}

        return [by_key[str(doc["id"])] for doc in results.documents if str(doc["id"]) in by_key]

    def get_total_count(self, results: SelectResult) -> int:
        return results.num_found


def quote(value: Any) -> str:
    """Render *value* as a quoted Solr phrase."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    text = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'
