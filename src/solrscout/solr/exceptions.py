"""Solr client exceptions."""

from __future__ import annotations


class SolrError(Exception):
    """Base exception for Solr client errors."""


class SolrConnectionError(SolrError):
    """Raised when the client cannot reach the Solr server."""


class SolrQueryError(SolrError):
    """Raised when Solr rejects an update or select request."""

    def __init__(self, message: str, status_code: int | None = None, solr_message: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.solr_message = solr_message
