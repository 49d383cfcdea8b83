"""Integration test fixtures — Docker-based Solr with an empty core.

Expects Solr to be running, e.g.:
    docker run -d -p 8983:8983 solr:9 solr-precreate posts

The ``posts`` core is cleared and its schema fields added on first use.
"""

from __future__ import annotations

import asyncio
import contextlib
import time

import httpx
import pytest

SOLR_HOST = "http://localhost:8983/solr"
SOLR_CORE = "posts"


def _wait_for_service(url: str, timeout: float = 90.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=30)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


async def _prepare_solr(host: str = SOLR_HOST, core: str = SOLR_CORE) -> None:
    async with httpx.AsyncClient(base_url=host, timeout=30) as client:
        # Explicit field types keep exact-match filters predictable
        for field in [
            {"name": "_class", "type": "string", "stored": True},
            {"name": "title", "type": "text_general", "stored": True, "multiValued": False},
            {"name": "status", "type": "string", "stored": True},
        ]:
            with contextlib.suppress(httpx.HTTPError):
                await client.post(f"/{core}/schema", json={"add-field": field})

        resp = await client.post(
            f"/{core}/update",
            json={"delete": {"query": "*:*"}},
            params={"commit": "true"},
        )
        resp.raise_for_status()


@pytest.fixture(scope="session")
def solr_ready():
    """Ensure Solr is running and the core is empty."""
    if not _wait_for_service(f"{SOLR_HOST}/{SOLR_CORE}/admin/ping", timeout=10.0):
        pytest.skip(f"Solr not available at {SOLR_HOST}/{SOLR_CORE}")
    asyncio.run(_prepare_solr())
    return SOLR_HOST
