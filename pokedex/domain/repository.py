from __future__ import annotations

from abc import ABC, abstractmethod

from pokedex.domain.entities import Pokemon
from pokedex.domain.value_objects import PokemonId, PokemonName


class PokemonRepository(ABC):
    """
    Read-only access to Pokemon.
    Implementations never raise: lookups that fail for any reason yield None or [].
    """

    @abstractmethod
    async def find_by_id(self, pokemon_id: PokemonId) -> Pokemon | None: ...

    @abstractmethod
    async def find_by_name(self, name: PokemonName) -> Pokemon | None: ...

    @abstractmethod
    async def list(self, limit: int = 20, offset: int = 0) -> list[Pokemon]: ...

    @abstractmethod
    async def search(self, query: str) -> list[Pokemon]:
        """Exact id or name match; returns zero or one Pokemon."""
