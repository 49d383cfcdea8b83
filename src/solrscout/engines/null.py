"""Null engine — Driver that indexes nothing and finds nothing.

Used when search is disabled (``SOLRSCOUT_SEARCH__DRIVER=null``) so model
code can keep calling the engine unconditionally.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from solrscout.scout.builder import Builder
from solrscout.scout.engine import Engine
from solrscout.scout.searchable import Searchable
from solrscout.solr.result import SelectResult


class NullEngine(Engine):
    """Search engine driver that discards every operation."""

    @property
    def name(self) -> str:
        return "null"

    async def update(self, models: Sequence[Searchable]) -> None:
        return None

    async def delete(self, models: Sequence[Searchable]) -> None:
        return None

    async def search(self, builder: Builder) -> SelectResult:
        return SelectResult()

    async def paginate(self, builder: Builder, per_page: int, page: int) -> SelectResult:
        return SelectResult()

    def map_ids(self, results: Any) -> list[Any]:
        return []

    async def map(self, builder: Builder, results: Any, model: Any) -> list[Any]:
        return []

    def get_total_count(self, results: Any) -> int:
        return 0

    async def flush(self, model: Any) -> None:
        return None
