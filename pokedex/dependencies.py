from fastapi import Depends

from pokedex.clients import CacheBackend, PokeAPIClient, build_cache
from pokedex.config import Settings, get_settings
from pokedex.domain import PokemonRepository
from pokedex.repositories import PokeAPIPokemonRepository
from pokedex.services import PokemonMapper, PokemonService

_cache = None
_poke_client = None


def get_cache(settings: Settings = Depends(get_settings)) -> CacheBackend:
    global _cache
    if _cache is None:
        _cache = build_cache(settings)
    return _cache


def get_poke_client(
    settings: Settings = Depends(get_settings),
    cache: CacheBackend = Depends(get_cache),
) -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient(settings=settings, cache=cache)
    return _poke_client


def get_pokemon_mapper() -> PokemonMapper:
    return PokemonMapper()


def get_pokemon_repository(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    mapper: PokemonMapper = Depends(get_pokemon_mapper),
) -> PokemonRepository:
    return PokeAPIPokemonRepository(api_client=poke_client, mapper=mapper)


def get_pokemon_service(
    repository: PokemonRepository = Depends(get_pokemon_repository),
) -> PokemonService:
    return PokemonService(repository=repository)


async def close_clients() -> None:
    """Release the shared HTTP client and cache connection (app shutdown)."""
    global _cache, _poke_client
    if _poke_client is not None:
        await _poke_client.close()
    elif _cache is not None:
        await _cache.close()
    _poke_client = None
    _cache = None
