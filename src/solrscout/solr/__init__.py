"""Solr client — Query builders and an async HTTP client for Apache Solr."""

from solrscout.solr.client import SolrClient
from solrscout.solr.exceptions import SolrConnectionError, SolrError, SolrQueryError
from solrscout.solr.query import FilterQuery, SelectQuery, UpdateQuery
from solrscout.solr.result import SelectResult

__all__ = [
    "FilterQuery",
    "SelectQuery",
    "SelectResult",
    "SolrClient",
    "SolrConnectionError",
    "SolrError",
    "SolrQueryError",
    "UpdateQuery",
]
