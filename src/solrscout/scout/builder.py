"""Search builder — Fluent query spec handed to an engine.

Usage::

    builder = Builder(Post, "solar nowcasting", engine=engine)
    posts = await builder.where("status", "published").take(20).get()
    page = await Builder(Post, "solar", engine=engine).paginate(per_page=10, page=2)
"""

from __future__ import annotations

import math
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from solrscout.scout.engine import Engine

SearchCallback = Callable[..., Awaitable[Any]]
"""``async callback(client, select_query)`` replacing the engine's own select call."""


class Page(BaseModel):
    """One page of mapped search results."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[Any] = Field(default_factory=list, description="Mapped models in relevance order")
    total: int = Field(default=0, description="Total number of matches reported by the engine")
    per_page: int = Field(description="Page size")
    page: int = Field(description="1-based page number")

    @property
    def last_page(self) -> int:
        if self.per_page <= 0:
            return 1
        return max(math.ceil(self.total / self.per_page), 1)

    @property
    def has_more_pages(self) -> bool:
        return self.page < self.last_page


class Builder:
    """Query specification for one model type.

    Args:
        model: The searchable model class (or an instance of it).
        query: Free-text query; empty means match everything.
        engine: Engine executing the search.
        callback: Optional async hook receiving ``(client, select_query)``.
    """

    def __init__(
        self,
        model: Any,
        query: str = "",
        *,
        engine: Engine,
        callback: SearchCallback | None = None,
    ) -> None:
        self.model = model
        self.query = query
        self.engine = engine
        self.callback = callback
        self.wheres: dict[str, Any] = {}
        self.where_ins: dict[str, list[Any]] = {}
        self.orders: list[tuple[str, str]] = []
        self.index: str | None = None
        self.limit: int | None = None

    def where(self, field: str, value: Any) -> Builder:
        self.wheres[field] = value
        return self

    def where_in(self, field: str, values: list[Any]) -> Builder:
        self.where_ins[field] = list(values)
        return self

    def within(self, index: str) -> Builder:
        """Search a custom index instead of the model's own."""
        self.index = index
        return self

    def take(self, limit: int) -> Builder:
        self.limit = limit
        return self

    def order_by(self, field: str, direction: str = "asc") -> Builder:
        self.orders.append((field, direction.lower()))
        return self

    def latest(self, field: str = "created_at") -> Builder:
        return self.order_by(field, "desc")

    def oldest(self, field: str = "created_at") -> Builder:
        return self.order_by(field, "asc")

    # ── Execution ────────────────────────────────────────────────────────

    async def raw(self) -> Any:
        """Raw engine results."""
        return await self.engine.search(self)

    async def keys(self) -> list[Any]:
        return await self.engine.keys(self)

    async def get(self) -> list[Any]:
        """Models matching the search, in relevance order."""
        return await self.engine.get(self)

    async def first(self) -> Any | None:
        models = await self.get()
        return models[0] if models else None

    async def paginate(self, per_page: int = 15, page: int = 1) -> Page:
        results = await self.engine.paginate(self, per_page, page)
        items = await self.engine.map(self, results, self.model)
        return Page(
            items=items,
            total=self.engine.get_total_count(results),
            per_page=per_page,
            page=page,
        )

    def __repr__(self) -> str:
        model_name = getattr(self.model, "__name__", type(self.model).__name__)
        return f"Builder(model={model_name}, query={self.query!r}, wheres={self.wheres!r})"
