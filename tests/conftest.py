import copy

import pytest

from pokedex.config import Settings

BASE_URL = "https://pokeapi.co/api/v2"

# Trimmed-down /pokemon/charizard response from PokeAPI
MOCK_CHARIZARD = {
    "id": 6,
    "name": "charizard",
    "height": 17,
    "weight": 905,
    "sprites": {
        "front_default": "https://example.test/sprites/6.png",
        "other": {"official-artwork": {"front_default": "https://example.test/artwork/6.png"}},
    },
    "types": [
        {"slot": 1, "type": {"name": "fire", "url": f"{BASE_URL}/type/10/"}},
        {"slot": 2, "type": {"name": "flying", "url": f"{BASE_URL}/type/3/"}},
    ],
    "stats": [
        {"base_stat": 78, "effort": 0, "stat": {"name": "hp"}},
        {"base_stat": 84, "effort": 0, "stat": {"name": "attack"}},
        {"base_stat": 78, "effort": 0, "stat": {"name": "defense"}},
        {"base_stat": 109, "effort": 3, "stat": {"name": "special-attack"}},
        {"base_stat": 85, "effort": 0, "stat": {"name": "special-defense"}},
        {"base_stat": 100, "effort": 0, "stat": {"name": "speed"}},
    ],
}


def _make_raw_pokemon(**overrides):
    data = copy.deepcopy(MOCK_CHARIZARD)
    data.update(overrides)
    return data


@pytest.fixture
def make_raw_pokemon():
    """Factory for raw PokeAPI records; keyword arguments replace top-level fields."""
    return _make_raw_pokemon


@pytest.fixture
def settings():
    """Settings for tests: in-memory cache and no sleeping between retries."""
    return Settings(base_url=BASE_URL, cache_backend="memory", retry_backoff=0)
