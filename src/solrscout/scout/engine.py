"""Search engine contract — Abstract driver every search backend implements.

An engine is responsible for:
  1. Keeping the index in sync with models (``update``, ``delete``, ``flush``)
  2. Executing searches described by a ``Builder`` (``search``, ``paginate``)
  3. Mapping raw backend results back to models (``map_ids``, ``map``,
     ``get_total_count``)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from solrscout.scout.builder import Builder
    from solrscout.scout.searchable import Searchable


class Engine(ABC):
    """Abstract base class for search engine drivers.

    Raw results returned by ``search()`` and ``paginate()`` are
    backend-specific; only the same engine's ``map_ids()``, ``map()`` and
    ``get_total_count()`` need to understand them.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique engine name (e.g., 'solr', 'null')."""

    async def initialize(self) -> None:
        """Prepare the engine (connections, pools, etc.)."""

    async def shutdown(self) -> None:
        """Release resources held by the engine."""

    @abstractmethod
    async def update(self, models: Sequence[Searchable]) -> None:
        """Add or replace the given models in the index."""

    @abstractmethod
    async def delete(self, models: Sequence[Searchable]) -> None:
        """Remove the given models from the index."""

    @abstractmethod
    async def search(self, builder: Builder) -> Any:
        """Run the builder's search and return raw results."""

    @abstractmethod
    async def paginate(self, builder: Builder, per_page: int, page: int) -> Any:
        """Run the builder's search for one 1-based page of results."""

    @abstractmethod
    def map_ids(self, results: Any) -> list[Any]:
        """Pluck the primary keys of the given results."""

    @abstractmethod
    async def map(self, builder: Builder, results: Any, model: Any) -> list[Any]:
        """Map raw results to model instances, keeping result order."""

    @abstractmethod
    def get_total_count(self, results: Any) -> int:
        """Total number of matches reported in raw results."""

    @abstractmethod
    async def flush(self, model: Any) -> None:
        """Remove every indexed record of the model's type."""

    async def get(self, builder: Builder) -> list[Any]:
        """Search and map results to models in one step."""
        results = await self.search(builder)
        return await self.map(builder, results, builder.model)

    async def keys(self, builder: Builder) -> list[Any]:
        """Search and return only the matching keys."""
        return self.map_ids(await self.search(builder))
