"""Searchable model contract — What an application model exposes to engines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from solrscout.scout.builder import Builder


def class_name(model: Any) -> str:
    """Qualified type name of a model instance, used as the ``_class`` tag."""
    cls = type(model)
    return f"{cls.__module__}.{cls.__qualname__}"


class Searchable(ABC):
    """Mixin for application models that can be indexed by a search engine.

    Subclasses must implement ``get_scout_models_by_ids()``, the bulk lookup
    the host ORM performs when mapping search hits back to records.  The
    remaining hooks have working defaults:

      - ``search_index``: index/endpoint name (defaults to the lower-cased
        class name)
      - ``scout_key_name``: attribute holding the unique key (``"id"``)
      - ``to_searchable_array()``: public instance attributes
    """

    search_index: ClassVar[str | None] = None
    scout_key_name: ClassVar[str] = "id"

    @classmethod
    def index_name(cls) -> str:
        return cls.search_index or cls.__name__.lower()

    def searchable_as(self) -> str:
        """Name of the index this model is stored in."""
        return self.index_name()

    def to_searchable_array(self) -> dict[str, Any]:
        """Field mapping submitted to the search index."""
        return {k: v for k, v in vars(self).items() if not k.startswith("_")}

    def get_scout_key(self) -> Any:
        return getattr(self, self.get_scout_key_name())

    def get_scout_key_name(self) -> str:
        return type(self).scout_key_name

    @classmethod
    @abstractmethod
    async def get_scout_models_by_ids(cls, builder: Builder, ids: list[Any]) -> list[Any]:
        """Load the records whose scout keys are in *ids*.

        Order of the returned list does not matter; records with no match
        are simply absent.
        """
