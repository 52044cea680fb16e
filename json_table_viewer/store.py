"""Fetch-once record store.

`RecordStore.load` is awaited once per session. Whatever happens, the loading
flag is cleared afterwards; on failure the records simply stay empty.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from .errors import FetchFailure
from .logging_utils import get_logger

log = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


async def fetch_records(
    endpoint: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[Dict[str, Any]]:
    """GET the endpoint and return its JSON array of records."""

    if client is not None:
        return await _fetch_with_client(client, endpoint)

    async with httpx.AsyncClient(follow_redirects=True, timeout=timeout) as local_client:
        return await _fetch_with_client(local_client, endpoint)


async def _fetch_with_client(client: httpx.AsyncClient, endpoint: str) -> List[Dict[str, Any]]:
    try:
        response = await client.get(endpoint, headers={"Accept": "application/json"})
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchFailure(endpoint, "request_failed", detail=str(exc)) from exc

    if response.status_code >= 400:
        raise FetchFailure(
            endpoint,
            "bad_status",
            detail=response.reason_phrase,
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise FetchFailure(endpoint, "invalid_json", detail=str(exc)) from exc

    if not isinstance(payload, list):
        raise FetchFailure(endpoint, "not_a_list", detail=type(payload).__name__)

    records = [item for item in payload if isinstance(item, dict)]
    dropped = len(payload) - len(records)
    if dropped:
        log.warning("Dropped %d non-object entries from %s", dropped, endpoint)
    return records


class RecordStore:
    """Holds the fetched records and the loading flag for one session."""

    def __init__(self, endpoint: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.records: List[Dict[str, Any]] = []
        self.loading = True
        self._started = False

    async def load(self, client: Optional[httpx.AsyncClient] = None) -> List[Dict[str, Any]]:
        if self._started:
            log.debug("Records already requested from %s; not fetching again", self.endpoint)
            return self.records
        self._started = True

        log.info("Fetching records from %s", self.endpoint)
        try:
            self.records = await fetch_records(self.endpoint, client=client, timeout=self.timeout)
        except FetchFailure as exc:
            log.error("Error fetching records: %s", exc, exc_info=exc)
        else:
            log.info("Loaded %d records", len(self.records), extra={"records": len(self.records)})
        finally:
            self.loading = False
        return self.records
