"""Repository implementations."""
from .pokeapi_repository import ItemFailure, ListResult, PokeAPIPokemonRepository

__all__ = [
    'PokeAPIPokemonRepository',
    'ItemFailure',
    'ListResult',
]
