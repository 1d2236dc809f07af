import json
import logging
import threading
import time
from typing import Any, Callable, Protocol

import redis.asyncio as aioredis

from pokedex.config import Settings

logger = logging.getLogger(__name__)


class CacheBackend(Protocol):
    """Key/value store for raw PokeAPI records with per-entry expiry."""

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any, ttl: int) -> None: ...

    async def clear(self, prefix: str = "") -> None: ...

    async def close(self) -> None: ...


class RedisCache:
    """Cache stored in Redis; expiry is delegated to SETEX."""

    def __init__(self, redis: aioredis.Redis):
        self.redis = redis

    @classmethod
    def from_url(cls, redis_url: str) -> "RedisCache":
        return cls(aioredis.from_url(redis_url, decode_responses=True))

    async def get(self, key: str) -> Any | None:
        cached = await self.redis.get(key)
        if cached is None:
            return None
        return json.loads(cached)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        await self.redis.setex(key, ttl, json.dumps(value))

    async def clear(self, prefix: str = "") -> None:
        keys = await self.redis.keys(f"{prefix}*")
        if keys:
            await self.redis.delete(*keys)

    async def close(self) -> None:
        await self.redis.aclose()


class MemoryCache:
    """
    In-process cache for single-worker deployments and tests.

    An entry written at time t with a given ttl is served only while
    clock() < t + ttl; expired entries are dropped on read. The lock makes
    it safe to share between threads as well as coroutines.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[float, str]] = {}

    async def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, payload = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
        return json.loads(payload)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        if ttl <= 0:
            return
        # Stored serialized so callers never share mutable state with the cache
        payload = json.dumps(value)
        with self._lock:
            self._entries[key] = (self._clock() + ttl, payload)

    async def clear(self, prefix: str = "") -> None:
        with self._lock:
            for key in [k for k in self._entries if k.startswith(prefix)]:
                del self._entries[key]

    async def close(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def build_cache(settings: Settings) -> CacheBackend:
    if settings.cache_backend == "memory":
        logger.info("Using in-memory cache")
        return MemoryCache()
    logger.info(f"Using Redis cache at {settings.redis_url}")
    return RedisCache.from_url(settings.redis_url)
