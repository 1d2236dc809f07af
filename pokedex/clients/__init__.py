"""Client modules for external API communication."""
from .cache import CacheBackend, MemoryCache, RedisCache, build_cache
from .pokeapi_client import PokeAPIClient, APIClientError

__all__ = [
    'PokeAPIClient',
    'APIClientError',
    'CacheBackend',
    'MemoryCache',
    'RedisCache',
    'build_cache',
]
