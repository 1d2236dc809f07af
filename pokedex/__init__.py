"""Read-only Pokedex catalog over PokeAPI."""

__version__ = "1.0.0"
