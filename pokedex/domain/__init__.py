"""Domain model: value objects, the Pokemon entity and the repository port."""
from .entities import Pokemon
from .repository import PokemonRepository
from .value_objects import PokemonId, PokemonName, PokemonStats, PokemonType

__all__ = [
    'Pokemon',
    'PokemonRepository',
    'PokemonId',
    'PokemonName',
    'PokemonStats',
    'PokemonType',
]
