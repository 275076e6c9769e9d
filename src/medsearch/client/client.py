"""MedSearch Python SDK — Async and sync clients for the MedSearch REST API.

Usage::

    # Async
    async with AsyncMedSearchClient("http://localhost:8080") as client:
        response = await client.search("rinoplastia")

    # Sync (wraps async client internally)
    client = MedSearchClient("http://localhost:8080")
    response = client.search("rinoplastia")
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine, Sequence
from typing import Any, TypeVar, cast

import httpx

_T = TypeVar("_T")

SearchPage = dict[str, Any]
"""Search response dict (mirrors ``SearchResponse`` JSON)."""


def _join(values: Sequence[str] | None) -> str | None:
    return ",".join(values) if values else None


# ═══════════════════════════════════════════════════════════════════════════════
# Async client
# ═══════════════════════════════════════════════════════════════════════════════


class AsyncMedSearchClient:
    """Async Python client for the MedSearch API.

    Args:
        base_url: MedSearch server URL, e.g. ``"http://localhost:8080"``.
        timeout: Request timeout in seconds.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.

    Example::

        async with AsyncMedSearchClient("http://localhost:8080") as client:
            page = await client.search("rinoplastia", specialties=["Rinoplastia"])
            for r in page["results"]:
                print(r["title"], r["relevanceScore"])
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        *,
        timeout: float = 10.0,
        **httpx_kwargs: Any,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            **httpx_kwargs,
        )

    async def __aenter__(self) -> AsyncMedSearchClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def health(self) -> dict[str, Any]:
        """Check server health.

        Returns:
            Health status dict with per-collection record counts.
        """
        resp = await self._client.get("/v1/health")
        resp.raise_for_status()
        return cast(dict[str, Any], resp.json())

    async def search(
        self,
        query: str,
        *,
        types: Sequence[str] | None = None,
        specialties: Sequence[str] | None = None,
        categories: Sequence[str] | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> SearchPage:
        """Run a federated search.

        Args:
            query: Free-text query.
            types: Accepted record kinds (case, article, course, archive).
            specialties: Accepted specialty labels.
            categories: Accepted category labels.
            limit: Page size (server default when None).
            offset: Ranked results to skip.

        Returns:
            Response dict with ``results``, ``total`` and ``pagination``.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response.
        """
        params: dict[str, Any] = {"q": query, "offset": offset}
        for key, value in (
            ("type", _join(types)),
            ("specialty", _join(specialties)),
            ("category", _join(categories)),
            ("limit", limit),
        ):
            if value is not None:
                params[key] = value

        resp = await self._client.get("/v1/search", params=params)
        resp.raise_for_status()
        return cast(SearchPage, resp.json())

    async def suggest(self, query: str, limit: int | None = None) -> list[str]:
        """Fetch type-ahead suggestions for a partial query.

        Returns:
            Distinct suggestion strings in priority order.
        """
        params: dict[str, Any] = {"q": query, "suggestions": "true"}
        if limit is not None:
            params["limit"] = limit
        resp = await self._client.get("/v1/search", params=params)
        resp.raise_for_status()
        return cast(list[str], resp.json()["suggestions"])


# ═══════════════════════════════════════════════════════════════════════════════
# Sync client
# ═══════════════════════════════════════════════════════════════════════════════


class MedSearchClient:
    """Synchronous Python client for the MedSearch API.

    Wraps :class:`AsyncMedSearchClient` using ``asyncio.run``.

    Args:
        base_url: MedSearch server URL.
        timeout: Request timeout in seconds.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        *,
        timeout: float = 10.0,
        **httpx_kwargs: Any,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._httpx_kwargs = httpx_kwargs

    def _run(self, coro: Coroutine[Any, Any, _T]) -> _T:
        """Run an async coroutine synchronously."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop and loop.is_running():
            # Already inside an event loop (e.g. Jupyter), run on a worker thread
            import concurrent.futures

            with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
                return pool.submit(asyncio.run, coro).result()
        return asyncio.run(coro)

    def _make_client(self) -> AsyncMedSearchClient:
        return AsyncMedSearchClient(
            self._base_url,
            timeout=self._timeout,
            **self._httpx_kwargs,
        )

    def health(self) -> dict[str, Any]:
        """Check server health."""

        async def _call() -> dict[str, Any]:
            async with self._make_client() as c:
                return await c.health()

        return self._run(_call())

    def search(
        self,
        query: str,
        *,
        types: Sequence[str] | None = None,
        specialties: Sequence[str] | None = None,
        categories: Sequence[str] | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> SearchPage:
        """Run a federated search."""

        async def _call() -> SearchPage:
            async with self._make_client() as c:
                return await c.search(
                    query,
                    types=types,
                    specialties=specialties,
                    categories=categories,
                    limit=limit,
                    offset=offset,
                )

        return self._run(_call())

    def suggest(self, query: str, limit: int | None = None) -> list[str]:
        """Fetch type-ahead suggestions for a partial query."""

        async def _call() -> list[str]:
            async with self._make_client() as c:
                return await c.suggest(query, limit)

        return self._run(_call())
