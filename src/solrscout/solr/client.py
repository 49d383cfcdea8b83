"""Apache Solr client — Query-builder API over Solr's JSON HTTP APIs.

Connects to Apache Solr (v8+) using ``httpx`` (async).  Updates go to the
JSON update handler, selects to the JSON Request API.  Each call targets a
named endpoint (core or collection); ``None`` means the client's default.

Usage::

    async with SolrClient("http://localhost:8983/solr", default_endpoint="posts") as client:
        select = client.create_select().set_query("solar")
        result = await client.select(select)
        print(result.num_found)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from solrscout.solr.exceptions import SolrConnectionError, SolrQueryError
from solrscout.solr.query import SelectQuery, UpdateQuery
from solrscout.solr.result import SelectResult

if TYPE_CHECKING:
    from solrscout.config.settings import SolrSettings

logger = logging.getLogger(__name__)


class SolrClient:
    """Async client for a Solr server.

    Args:
        base_url: Solr base URL, e.g. ``"http://localhost:8983/solr"``.
        default_endpoint: Core/collection used when a call names none.
        username: Optional basic-auth username.
        password: Optional basic-auth password.
        timeout: HTTP request timeout in seconds.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8983/solr",
        default_endpoint: str = "collection1",
        *,
        username: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
        **httpx_kwargs: Any,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.default_endpoint = default_endpoint

        auth = None
        if username and password:
            auth = httpx.BasicAuth(username, password)

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            auth=auth,
            **httpx_kwargs,
        )

    @classmethod
    def from_settings(cls, settings: SolrSettings, **httpx_kwargs: Any) -> SolrClient:
        """Create a client from ``SolrSettings``."""
        return cls(
            settings.base_url,
            settings.default_endpoint,
            username=settings.username,
            password=settings.password,
            timeout=settings.timeout,
            **httpx_kwargs,
        )

    async def __aenter__(self) -> SolrClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    # ── Builders ─────────────────────────────────────────────────────────

    def create_update(self) -> UpdateQuery:
        return UpdateQuery()

    def create_select(self) -> SelectQuery:
        return SelectQuery()

    # ── Execution ────────────────────────────────────────────────────────

    async def update(self, query: UpdateQuery, endpoint: str | None = None) -> dict[str, Any]:
        """Send an update batch to *endpoint*'s ``/update`` handler.

        Returns:
            The decoded Solr response body.
        """
        endpoint = endpoint or self.default_endpoint
        logger.debug(
            "Solr update on '%s': %d command(s), commit=%s",
            endpoint,
            len(query.commands),
            query.commit,
        )
        return await self._request(
            "POST",
            f"/{endpoint}/update",
            params=query.to_params(),
            content=query.to_payload(),
            headers={"Content-Type": "application/json"},
        )

    async def select(self, query: SelectQuery, endpoint: str | None = None) -> SelectResult:
        """Run a select query against *endpoint*'s ``/select`` handler."""
        endpoint = endpoint or self.default_endpoint
        body = query.to_body()
        logger.debug("Solr select on '%s': %s", endpoint, body)
        data = await self._request("POST", f"/{endpoint}/select", json=body)
        return SelectResult.from_response(data)

    async def ping(self, endpoint: str | None = None) -> bool:
        """Ping *endpoint*'s admin handler; ``True`` when Solr reports ``OK``."""
        endpoint = endpoint or self.default_endpoint
        data = await self._request("GET", f"/{endpoint}/admin/ping")
        return data.get("status") == "OK"

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            resp = await self._client.request(method, url, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            solr_message = _error_message(e.response)
            raise SolrQueryError(
                f"Solr request {method} {url} failed with HTTP {e.response.status_code}: {solr_message or e}",
                status_code=e.response.status_code,
                solr_message=solr_message,
            ) from e
        except httpx.TransportError as e:
            raise SolrConnectionError(f"Failed to connect to Solr at {self.base_url}: {e}") from e
        except httpx.HTTPError as e:
            raise SolrQueryError(f"Solr request {method} {url} failed: {e}") from e
        except ValueError as e:
            raise SolrQueryError(f"Solr returned a non-JSON response for {method} {url}: {e}") from e


def _error_message(response: httpx.Response) -> str | None:
    """Extract Solr's ``error.msg`` from an error response, if any."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            return error.get("msg")
    return None
