import asyncio

import httpx
import pytest
import redis.asyncio as redis

from pokedex.clients.cache import RedisCache
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.config import Settings

docker = pytest.importorskip("docker")
RedisContainer = pytest.importorskip("testcontainers.redis").RedisContainer

BASE_URL = "https://pokeapi.co/api/v2"
MOCK_BULBASAUR = {"id": 1, "name": "bulbasaur", "height": 7, "weight": 69}


def _docker_available() -> bool:
    try:
        docker.from_env().ping()
    except Exception:
        return False
    return True


pytestmark = pytest.mark.skipif(not _docker_available(), reason="Docker is not available")


@pytest.fixture(scope="module")
def redis_container():
    """Start a real Redis container for integration tests."""
    with RedisContainer("redis:7-alpine") as container:
        yield container


@pytest.fixture(scope="module")
def redis_url(redis_container):
    """Get Redis connection URL from the container."""
    host = redis_container.get_container_host_ip()
    port = redis_container.get_exposed_port(6379)
    return f"redis://{host}:{port}"


@pytest.mark.asyncio
async def test_redis_cache_expires_entries(redis_url):
    cache = RedisCache(redis.from_url(redis_url, decode_responses=True))
    await cache.clear("test:")

    await cache.set("test:expiring", {"name": "ditto"}, ttl=1)
    assert await cache.get("test:expiring") == {"name": "ditto"}

    await asyncio.sleep(1.5)
    assert await cache.get("test:expiring") is None

    await cache.close()


@pytest.mark.httpx_mock(can_send_already_matched_responses=True)
@pytest.mark.asyncio
async def test_cache_persists_across_client_instances(httpx_mock, redis_url):
    """Two clients sharing one Redis only call PokeAPI once."""
    calls = []

    def respond(request):
        calls.append(request)
        return httpx.Response(status_code=200, json=MOCK_BULBASAUR)

    httpx_mock.add_callback(respond, url=f"{BASE_URL}/pokemon/bulbasaur")
    settings = Settings(base_url=BASE_URL, retry_backoff=0)

    first = PokeAPIClient(settings=settings, cache=RedisCache(redis.from_url(redis_url, decode_responses=True)))
    await first.clear_cache()
    assert await first.get_pokemon_by_name("bulbasaur") == MOCK_BULBASAUR
    await first.close()

    second = PokeAPIClient(settings=settings, cache=RedisCache(redis.from_url(redis_url, decode_responses=True)))
    assert await second.get_pokemon_by_name("BULBASAUR") == MOCK_BULBASAUR
    await second.clear_cache()
    await second.close()

    assert len(calls) == 1
