from pydantic import BaseModel, ConfigDict

from pokedex.domain.value_objects import PokemonId, PokemonName, PokemonStats, PokemonType


class Pokemon(BaseModel):
    """
    A Pokemon as seen by the catalog.
    Immutable: a "modified" Pokemon is a new instance (model_copy).
    """

    model_config = ConfigDict(frozen=True)

    id: PokemonId
    name: PokemonName
    image_url: str = ""
    # Declared order is kept, duplicates are not removed
    types: tuple[PokemonType, ...] = ()
    stats: PokemonStats
    height: float  # meters
    weight: float  # kilograms

    def formatted_height(self) -> str:
        return f"{self.height:.1f} m"

    def formatted_weight(self) -> str:
        return f"{self.weight:.1f} kg"
