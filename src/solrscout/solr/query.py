"""Solr query builders — Update and select requests assembled before execution.

Builders are plain mutable objects: the caller adds documents, deletes,
filters and windowing, then hands the builder to ``SolrClient.update()`` or
``SolrClient.select()``.  Rendering to the wire format happens here, so the
client only deals with transport.

Usage::

    update = client.create_update()
    update.add_document(update.create_document({"id": "1", "title": "Solar"}))
    update.add_commit()
    await client.update(update, "posts")

    select = client.create_select()
    select.set_query("solar")
    select.create_filter_query("status").set_query('status:"active"')
    select.set_start(20).set_rows(10)
    result = await client.select(select, "posts")
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any

MATCH_ALL = "*:*"


def _json_default(value: Any) -> Any:
    """Encode values ``json`` does not handle natively."""
    if isinstance(value, datetime):
        return value.isoformat().replace("+00:00", "Z")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _render(name: str, body: Any) -> Any:
    # Solr ids are strings on the wire; model keys may be ints.
    if name == "delete" and isinstance(body, list):
        return [str(i) for i in body]
    return body


# ═══════════════════════════════════════════════════════════════════════════════
# Update
# ═══════════════════════════════════════════════════════════════════════════════


class UpdateQuery:
    """A batch of update commands sent to an endpoint's ``/update`` handler.

    Commands are kept in insertion order and rendered as a JSON object with
    one key per command.  Solr's JSON loader accepts repeated ``add`` keys,
    which is the only way to submit several ``add`` commands in one body.
    """

    def __init__(self) -> None:
        self._commands: list[tuple[str, Any]] = []
        self.commit = False

    @staticmethod
    def create_document(fields: dict[str, Any]) -> dict[str, Any]:
        """Create a document from a field mapping."""
        return dict(fields)

    def add_document(self, document: dict[str, Any]) -> UpdateQuery:
        self._commands.append(("add", {"doc": document}))
        return self

    def add_documents(self, documents: list[dict[str, Any]]) -> UpdateQuery:
        for document in documents:
            self.add_document(document)
        return self

    def add_delete_by_id(self, doc_id: Any) -> UpdateQuery:
        return self.add_delete_by_ids([doc_id])

    def add_delete_by_ids(self, ids: list[Any]) -> UpdateQuery:
        self._commands.append(("delete", list(ids)))
        return self

    def add_delete_query(self, query: str) -> UpdateQuery:
        self._commands.append(("delete", {"query": query}))
        return self

    def add_commit(self) -> UpdateQuery:
        """Ask Solr to commit once the batch is applied."""
        self.commit = True
        return self

    @property
    def commands(self) -> list[tuple[str, Any]]:
        return list(self._commands)

    @property
    def documents(self) -> list[dict[str, Any]]:
        return [body["doc"] for name, body in self._commands if name == "add"]

    def is_empty(self) -> bool:
        return not self._commands and not self.commit

    def to_payload(self) -> str:
        """Render the batch as a Solr JSON update command body."""
        parts = [
            f"{json.dumps(name)}:{json.dumps(_render(name, body), default=_json_default, separators=(',', ':'))}"
            for name, body in self._commands
        ]
        if self.commit and not parts:
            parts.append('"commit":{}')
        return "{" + ",".join(parts) + "}"

    def to_params(self) -> dict[str, str]:
        return {"commit": "true"} if self.commit else {}


# ═══════════════════════════════════════════════════════════════════════════════
# Select
# ═══════════════════════════════════════════════════════════════════════════════


class FilterQuery:
    """A keyed ``fq`` clause attached to a select query."""

    def __init__(self, key: str) -> None:
        self.key = key
        self.query: str = ""

    def set_query(self, query: str) -> FilterQuery:
        self.query = query
        return self

    def __repr__(self) -> str:
        return f"FilterQuery(key={self.key!r}, query={self.query!r})"


class SelectQuery:
    """A request against an endpoint's ``/select`` handler (JSON Request API)."""

    def __init__(self) -> None:
        self.query: str = MATCH_ALL
        self.start: int | None = None
        self.rows: int | None = None
        self.fields: list[str] = []
        self.sorts: list[tuple[str, str]] = []
        self.params: dict[str, Any] = {}
        self._filter_queries: dict[str, FilterQuery] = {}

    def set_query(self, query: str) -> SelectQuery:
        self.query = query
        return self

    def create_filter_query(self, key: str) -> FilterQuery:
        """Create a filter query under *key*, replacing any existing one."""
        fq = FilterQuery(key)
        self._filter_queries[key] = fq
        return fq

    def get_filter_query(self, key: str) -> FilterQuery | None:
        return self._filter_queries.get(key)

    def remove_filter_query(self, key: str) -> SelectQuery:
        self._filter_queries.pop(key, None)
        return self

    @property
    def filter_queries(self) -> dict[str, FilterQuery]:
        return dict(self._filter_queries)

    def set_start(self, start: int) -> SelectQuery:
        self.start = start
        return self

    def set_rows(self, rows: int) -> SelectQuery:
        self.rows = rows
        return self

    def set_fields(self, fields: list[str]) -> SelectQuery:
        self.fields = list(fields)
        return self

    def add_sort(self, field: str, direction: str = "asc") -> SelectQuery:
        direction = direction.lower()
        if direction not in ("asc", "desc"):
            raise ValueError(f"Invalid sort direction '{direction}', expected 'asc' or 'desc'")
        self.sorts.append((field, direction))
        return self

    def set_param(self, name: str, value: Any) -> SelectQuery:
        self.params[name] = value
        return self

    def to_body(self) -> dict[str, Any]:
        """Render the query as a JSON Request API body."""
        body: dict[str, Any] = {"query": self.query}
        filters = [fq.query for fq in self._filter_queries.values() if fq.query]
        if filters:
            body["filter"] = filters
        if self.start is not None:
            body["offset"] = self.start
        if self.rows is not None:
            body["limit"] = self.rows
        if self.sorts:
            body["sort"] = ",".join(f"{field} {direction}" for field, direction in self.sorts)
        if self.fields:
            body["fields"] = list(self.fields)
        if self.params:
            body["params"] = dict(self.params)
        return body
