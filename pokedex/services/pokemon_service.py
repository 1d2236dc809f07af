import logging

from pydantic import ValidationError

from pokedex.domain.repository import PokemonRepository
from pokedex.domain.value_objects import PokemonId, PokemonName, is_numeric_identifier
from pokedex.models import PokemonDetail, PokemonListItem

logger = logging.getLogger(__name__)


class PokemonService:
    # Service depends on the repository port, not on PokeAPI
    def __init__(self, repository: PokemonRepository):
        self._repository = repository

    async def list_pokemon(self, limit: int = 20, offset: int = 0) -> list[PokemonListItem]:
        """
        Endpoint 1: One page of Pokemon for the catalog listing.
        """
        pokemon = await self._repository.list(limit, offset)
        return [PokemonListItem.from_entity(p) for p in pokemon]

    async def get_pokemon_by_id(self, pokemon_id: int) -> PokemonDetail | None:
        try:
            valid_id = PokemonId(pokemon_id)
        except ValidationError:
            logger.info(f"Rejected invalid Pokemon id {pokemon_id!r}")
            return None

        pokemon = await self._repository.find_by_id(valid_id)
        return PokemonDetail.from_entity(pokemon) if pokemon is not None else None

    async def get_pokemon_by_name(self, name: str) -> PokemonDetail | None:
        try:
            valid_name = PokemonName(name)
        except ValidationError:
            logger.info(f"Rejected invalid Pokemon name {name!r}")
            return None

        pokemon = await self._repository.find_by_name(valid_name)
        return PokemonDetail.from_entity(pokemon) if pokemon is not None else None

    async def get_pokemon(self, identifier: str) -> PokemonDetail | None:
        """
        Endpoint 2: Detail page lookup.
        A numeric identifier is tried as an id first, then anything is tried as a name.
        """
        detail = None
        if is_numeric_identifier(identifier):
            detail = await self.get_pokemon_by_id(int(identifier))
        if detail is None:
            detail = await self.get_pokemon_by_name(identifier)
        return detail

    async def search_pokemon(self, query: str) -> list[PokemonListItem]:
        """
        Endpoint 3: Exact match search by id or name (zero or one result).
        """
        if not query.strip():
            return []

        pokemon = await self._repository.search(query)
        return [PokemonListItem.from_entity(p) for p in pokemon]
