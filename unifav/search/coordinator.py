"""Directory search -- builds the remote query, runs it, classifies the outcome."""

import asyncio
import time
from typing import Optional

import httpx

from unifav.search.query import Query, build_query
from unifav.search.records import parse_records
from unifav.search.results import SearchOk, SearchResult, TransportError
from unifav.utils.config import settings
from unifav.utils.logger import get_logger, log_search

log = get_logger(__name__)

FALLBACK_ERROR = "Unable to fetch universities. Check your connection or the URL."


class SearchCoordinator:
    """Query the university directory over HTTP.

    Failures never surface as an empty result: anything that goes wrong
    between sending the request and parsing the body is a ``TransportError``.
    Each call is independent; nothing is retried or cached.
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self.base_url = base_url or settings.directory_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.http_timeout,
            follow_redirects=True,
        )

    def build_query(self, country: Optional[str], university_name: Optional[str]) -> Query:
        return build_query(country, university_name)

    async def execute(self, query: Query) -> SearchResult:
        """GET the directory with *query* and return the classified outcome."""
        url = query.url(self.base_url)
        log.info("Searching directory: %s", url)
        started = time.perf_counter()
        result = await self._fetch(url)
        elapsed_ms = (time.perf_counter() - started) * 1000

        criteria = dict(query.params)
        if isinstance(result, SearchOk):
            log.info("Directory returned %d record(s)", len(result.records))
            await _record(criteria, "ok", len(result.records), elapsed_ms)
        else:
            log.warning("Directory search failed: %s", result.message)
            await _record(criteria, "transport_error", 0, elapsed_ms, result.message)
        return result

    async def search(
        self, country: Optional[str], university_name: Optional[str]
    ) -> SearchResult:
        """Convenience: ``build_query`` followed by ``execute``."""
        return await self.execute(self.build_query(country, university_name))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _fetch(self, url: str) -> SearchResult:
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as exc:
            return TransportError(message=str(exc) or FALLBACK_ERROR)

        if resp.status_code != 200:
            return TransportError(message=f"Network error: {resp.status_code}")

        try:
            records = parse_records(resp.json())
        except (ValueError, RecursionError) as exc:
            # json.JSONDecodeError is a ValueError too
            return TransportError(message=f"Malformed response: {exc}")
        return SearchOk(records=tuple(records))


async def _record(*args) -> None:
    """Append the analytics line off the event loop; a failed write never fails the search."""
    try:
        await asyncio.to_thread(log_search, *args)
    except OSError:
        log.warning("Could not write search analytics", exc_info=True)
