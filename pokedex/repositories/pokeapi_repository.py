from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from pokedex.clients.pokeapi_client import APIClientError, PokeAPIClient
from pokedex.domain.entities import Pokemon
from pokedex.domain.repository import PokemonRepository
from pokedex.domain.value_objects import PokemonId, PokemonName, is_numeric_identifier
from pokedex.services.pokemon_mapper import MappingError, PokemonMapper

logger = logging.getLogger(__name__)

# Everything the client/mapper pipeline can raise for a single record
LOOKUP_ERRORS = (APIClientError, MappingError, ValidationError)


def _describe(error: Exception) -> str:
    if isinstance(error, APIClientError):
        return f"{error.detail} (endpoint={error.endpoint})"
    return str(error)


class ItemFailure(BaseModel):
    """A list entry that could not be loaded, and why."""

    model_config = ConfigDict(frozen=True)

    name: str
    reason: str


class ListResult(BaseModel):
    """Outcome of loading a page: loaded Pokemon in page order plus the entries that failed."""

    model_config = ConfigDict(frozen=True)

    pokemon: list[Pokemon] = []
    failures: list[ItemFailure] = []


class PokeAPIPokemonRepository(PokemonRepository):
    """PokemonRepository backed by PokeAPI; faults are logged and turned into None / []."""

    def __init__(self, api_client: PokeAPIClient, mapper: PokemonMapper):
        self._api_client = api_client
        self._mapper = mapper

    async def find_by_id(self, pokemon_id: PokemonId) -> Pokemon | None:
        try:
            data = await self._api_client.get_pokemon_by_id(pokemon_id.value)
            if data is None:
                return None
            return self._mapper.map_to_pokemon(data)
        except LOOKUP_ERRORS as e:
            logger.error(f"Failed to find Pokemon by id={pokemon_id}: {_describe(e)}")
            return None

    async def find_by_name(self, name: PokemonName) -> Pokemon | None:
        try:
            data = await self._api_client.get_pokemon_by_name(name.value)
            if data is None:
                return None
            return self._mapper.map_to_pokemon(data)
        except LOOKUP_ERRORS as e:
            logger.error(f"Failed to find Pokemon by name={name}: {_describe(e)}")
            return None

    async def list(self, limit: int = 20, offset: int = 0) -> list[Pokemon]:
        result = await self.list_with_failures(limit, offset)
        return result.pokemon

    async def list_with_failures(self, limit: int = 20, offset: int = 0) -> ListResult:
        """
        Loads one page of Pokemon.

        Each entry of the page is fetched by name and mapped on its own; an entry
        that fails is recorded in ListResult.failures and does not affect the others.
        """
        try:
            page = await self._api_client.get_pokemon_list(limit, offset)
        except APIClientError as e:
            logger.error(f"Failed to list Pokemon limit={limit} offset={offset}: {_describe(e)}")
            return ListResult()

        results = page.get("results") if isinstance(page, dict) else None
        if not isinstance(results, list):
            logger.warning(f"No results from API for limit={limit} offset={offset}")
            return ListResult()

        names = [entry["name"] for entry in results if isinstance(_name_of(entry), str)]
        # gather keeps the page order
        outcomes = await asyncio.gather(*(self._load_entry(name) for name in names))

        result = ListResult(
            pokemon=[o for o in outcomes if isinstance(o, Pokemon)],
            failures=[o for o in outcomes if isinstance(o, ItemFailure)],
        )
        logger.info(
            f"Loaded {len(result.pokemon)} Pokemon for limit={limit} offset={offset} "
            f"({len(result.failures)} failed)"
        )
        return result

    async def _load_entry(self, name: str) -> Pokemon | ItemFailure:
        try:
            data = await self._api_client.get_pokemon_by_name(name)
            if data is None:
                logger.warning(f"Pokemon {name!r} from list not found")
                return ItemFailure(name=name, reason="not found")
            return self._mapper.map_to_pokemon(data)
        except LOOKUP_ERRORS as e:
            logger.warning(f"Failed to load Pokemon {name!r} in list: {_describe(e)}")
            return ItemFailure(name=name, reason=_describe(e))

    async def search(self, query: str) -> list[Pokemon]:
        """
        PokeAPI has no search endpoint: a numeric query is tried as an id first,
        then the query is tried as an exact name.
        """
        if not query.strip():
            return []

        logger.info(f"Searching Pokemon query={query!r}")

        if is_numeric_identifier(query):
            try:
                pokemon = await self.find_by_id(PokemonId(int(query)))
            except ValidationError as e:
                logger.warning(f"Search by id failed for query={query!r}: {e}")
                pokemon = None
            if pokemon is not None:
                return [pokemon]

        try:
            name = PokemonName(query)
        except ValidationError as e:
            logger.warning(f"Search by name failed for query={query!r}: {e}")
            return []

        pokemon = await self.find_by_name(name)
        if pokemon is None:
            logger.info(f"Pokemon not found for query={query!r}")
            return []
        return [pokemon]


def _name_of(entry: Any) -> Any:
    return entry.get("name") if isinstance(entry, dict) else None
