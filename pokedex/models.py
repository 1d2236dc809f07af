from pydantic import BaseModel

from pokedex.domain.entities import Pokemon


# Reduced view used by list and search results (Public Endpoints 1 and 3)
class PokemonListItem(BaseModel):
    id: int
    name: str
    image_url: str

    @classmethod
    def from_entity(cls, pokemon: Pokemon) -> "PokemonListItem":
        return cls(id=pokemon.id.value, name=pokemon.name.formatted(), image_url=pokemon.image_url)


class TypeBadge(BaseModel):
    name: str
    color: str


# Model for the detail page (Public Endpoint 2)
class PokemonDetail(BaseModel):
    id: int
    name: str
    image_url: str
    types: list[TypeBadge]
    stats: dict[str, int]
    height: float
    weight: float
    formatted_height: str
    formatted_weight: str

    @classmethod
    def from_entity(cls, pokemon: Pokemon) -> "PokemonDetail":
        return cls(
            id=pokemon.id.value,
            name=pokemon.name.formatted(),
            image_url=pokemon.image_url,
            types=[TypeBadge(name=t.formatted(), color=t.color) for t in pokemon.types],
            stats=pokemon.stats.to_dict(),
            height=pokemon.height,
            weight=pokemon.weight,
            formatted_height=pokemon.formatted_height(),
            formatted_weight=pokemon.formatted_weight(),
        )


class PokemonListResponse(BaseModel):
    items: list[PokemonListItem]
    page: int
    has_more: bool


class SearchResponse(BaseModel):
    query: str
    results: list[PokemonListItem]
