"""Application services and the PokeAPI record mapper."""
from .pokemon_mapper import MappingError, PokemonMapper
from .pokemon_service import PokemonService

__all__ = [
    'PokemonService',
    'PokemonMapper',
    'MappingError',
]
