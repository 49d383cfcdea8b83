"""Search abstraction — Engine contract, query builder and searchable models.

Implement ``Engine`` to plug a search backend in; mix ``Searchable`` into
application models to make them indexable.
"""

from solrscout.scout.builder import Builder, Page
from solrscout.scout.engine import Engine
from solrscout.scout.exceptions import EngineError, EngineNotFoundError
from solrscout.scout.registry import EngineRegistry
from solrscout.scout.searchable import Searchable, class_name

__all__ = [
    "Builder",
    "Engine",
    "EngineError",
    "EngineNotFoundError",
    "EngineRegistry",
    "Page",
    "Searchable",
    "class_name",
]
