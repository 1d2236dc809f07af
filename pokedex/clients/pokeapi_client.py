import asyncio
import logging
from typing import Any
from urllib.parse import quote

import httpx
from fastapi import HTTPException
from redis.exceptions import RedisError

from pokedex.clients.cache import CacheBackend
from pokedex.config import Settings

logger = logging.getLogger(__name__)

# Upstream answers worth another attempt
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class APIClientError(HTTPException):
    """PokeAPI could not be reached or answered with an unexpected status."""

    def __init__(self, endpoint: str, detail: str, upstream_status: int | None = None):
        super().__init__(status_code=503, detail=f"External API Error: {detail}")
        self.endpoint = endpoint
        self.upstream_status = upstream_status


class PokeAPIClient:
    """
    Fetches raw Pokemon records from PokeAPI.

    Every lookup goes through the cache first; only successful responses are
    cached. A 404 yields None, anything else that is not a 2xx raises
    APIClientError once the retries are used up.
    """

    def __init__(self, settings: Settings, cache: CacheBackend, http_client: httpx.AsyncClient | None = None):
        self.settings = settings
        self.cache = cache
        # TLS certificates are verified (httpx default)
        self.client = http_client or httpx.AsyncClient(base_url=settings.base_url, timeout=settings.timeout)

    async def get_pokemon_by_id(self, pokemon_id: int) -> dict[str, Any] | None:
        return await self._cached_get(f"pokemon:id:{pokemon_id}", f"/pokemon/{pokemon_id}")

    async def get_pokemon_by_name(self, name: str) -> dict[str, Any] | None:
        # Normalize the name to lowercase for consistent caching
        normalized_name = name.lower()
        # One path segment: "?", "#" and "/" must not leak into the URL structure
        endpoint = f"/pokemon/{quote(normalized_name, safe='')}"
        return await self._cached_get(f"pokemon:name:{normalized_name}", endpoint)

    async def get_pokemon_list(self, limit: int = 20, offset: int = 0) -> dict[str, Any] | None:
        """Fetches one page of name references: {"count", "next", "previous", "results": [{"name", "url"}]}."""
        return await self._cached_get(
            f"pokemon:list:{limit}:{offset}",
            "/pokemon",
            params={"limit": limit, "offset": offset},
        )

    async def _cached_get(self, cache_key: str, endpoint: str, params: dict[str, Any] | None = None) -> Any | None:
        try:
            cached = await self.cache.get(cache_key)
        except RedisError as e:
            # An unavailable cache degrades to a plain upstream fetch
            logger.warning(f"Cache read failed for {cache_key}: {e}")
            cached = None

        if cached is not None:
            logger.info(f"Cache hit for {cache_key}")
            return cached

        logger.info(f"Cache miss for {cache_key}")
        data = await self._request(endpoint, params)

        # Not found is not cached, the next call asks upstream again
        if data is not None:
            try:
                await self.cache.set(cache_key, data, self.settings.cache_ttl)
            except RedisError as e:
                logger.warning(f"Cache write failed for {cache_key}: {e}")
        return data

    async def _request(self, endpoint: str, params: dict[str, Any] | None = None) -> Any | None:
        """Performs the GET with retries and maps the outcome."""
        attempts = self.settings.max_retries + 1

        for attempt in range(1, attempts + 1):
            try:
                response = await self.client.get(endpoint, params=params)
            except httpx.TransportError as e:
                if attempt < attempts:
                    logger.warning(f"PokeAPI network error on {endpoint} (attempt {attempt}/{attempts}): {e!r}")
                    await asyncio.sleep(self.settings.retry_backoff)
                    continue
                logger.error(f"PokeAPI request exception on {endpoint}: {e!r}")
                raise APIClientError(endpoint, f"PokeAPI network error: {e!r}") from e

            if response.status_code in RETRYABLE_STATUS_CODES and attempt < attempts:
                logger.warning(
                    f"PokeAPI returned {response.status_code} on {endpoint} (attempt {attempt}/{attempts})"
                )
                await asyncio.sleep(self.settings.retry_backoff)
                continue
            break

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                logger.error(f"PokeAPI returned a non-JSON body on {endpoint}")
                raise APIClientError(endpoint, "PokeAPI returned an unexpected response format.") from e

        if response.status_code == 404:
            return None

        logger.error(f"PokeAPI request failed on {endpoint}: status={response.status_code} body={response.text[:200]}")
        raise APIClientError(
            endpoint,
            f"PokeAPI failed with status {response.status_code}",
            upstream_status=response.status_code,
        )

    async def clear_cache(self):
        """Clear the Pokemon cache. Useful for testing."""
        await self.cache.clear("pokemon:")

    async def close(self):
        """Close the HTTP client and the cache connection (call on app shutdown)."""
        await self.client.aclose()
        await self.cache.close()
