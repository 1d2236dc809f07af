import logging
from typing import Any

from pydantic import ValidationError

from pokedex.domain.entities import Pokemon
from pokedex.domain.value_objects import PokemonId, PokemonName, PokemonStats, PokemonType

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "name", "sprites", "types", "stats", "height", "weight")

# PokeAPI stat name -> PokemonStats field
STAT_FIELDS = {
    "hp": "hp",
    "attack": "attack",
    "defense": "defense",
    "special-attack": "special_attack",
    "special-defense": "special_defense",
    "speed": "speed",
}


class MappingError(ValueError):
    """A raw PokeAPI record cannot be turned into a Pokemon."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


def _dig(data: Any, *keys: str) -> Any:
    """Walks nested dicts, returning None as soon as a level is missing."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


class PokemonMapper:
    """Maps PokeAPI /pokemon/{id|name} responses to Pokemon entities."""

    def map_to_pokemon(self, data: dict[str, Any]) -> Pokemon:
        """
        Raises MappingError for structurally unusable records and lets pydantic's
        ValidationError through when a value object rejects its input
        (e.g. a stat above 255 or an id of 0).
        """
        self._validate_api_data(data)

        return Pokemon(
            id=PokemonId(data["id"]),
            name=PokemonName(data["name"]),
            image_url=self._extract_image_url(data),
            types=self._extract_types(data),
            stats=self._extract_stats(data),
            height=self._from_tenths(data, "height"),
            weight=self._from_tenths(data, "weight"),
        )

    def _validate_api_data(self, data: dict[str, Any]) -> None:
        if not isinstance(data, dict):
            raise MappingError("API response is not an object")
        for field in REQUIRED_FIELDS:
            if data.get(field) is None:
                raise MappingError(f"API response missing required field: {field}", field=field)

    def _extract_image_url(self, data: dict[str, Any]) -> str:
        # Prefer official artwork, fallback to front default
        for path in (("sprites", "other", "official-artwork", "front_default"), ("sprites", "front_default")):
            url = _dig(data, *path)
            if isinstance(url, str):
                return url
        return ""

    def _extract_types(self, data: dict[str, Any]) -> list[PokemonType]:
        if not isinstance(data["types"], list):
            return []

        types = []
        for entry in data["types"]:
            type_name = _dig(entry, "type", "name")
            if type_name is None:
                continue
            try:
                types.append(PokemonType(type_name))
            except ValidationError:
                # Unknown types are dropped, the rest of the record still maps
                logger.debug(f"Skipping unknown type {type_name!r} for {data.get('name')}")
        return types

    def _extract_stats(self, data: dict[str, Any]) -> PokemonStats:
        if not isinstance(data["stats"], list):
            raise MappingError("Stats data is missing or invalid", field="stats")

        stats_map = {}
        for entry in data["stats"]:
            stat_name = _dig(entry, "stat", "name") or ""
            if not isinstance(stat_name, str):
                raise MappingError("Stats data is missing or invalid", field="stats")
            base_stat = _dig(entry, "base_stat")
            stats_map[stat_name] = 0 if base_stat is None else base_stat

        return PokemonStats(**{field: stats_map.get(name, 0) for name, field in STAT_FIELDS.items()})

    def _from_tenths(self, data: dict[str, Any], field: str) -> float:
        """PokeAPI reports height in decimeters and weight in hectograms."""
        raw = data[field]
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise MappingError(f"Field '{field}' must be numeric, got {raw!r}", field=field)
        return raw / 10
