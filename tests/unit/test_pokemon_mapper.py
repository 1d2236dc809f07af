import pytest
from pydantic import ValidationError

from pokedex.domain.entities import Pokemon
from pokedex.domain.value_objects import PokemonId, PokemonName, PokemonType
from pokedex.services.pokemon_mapper import REQUIRED_FIELDS, MappingError, PokemonMapper


@pytest.fixture
def mapper():
    return PokemonMapper()


def test_maps_complete_record(mapper, make_raw_pokemon):
    pokemon = mapper.map_to_pokemon(make_raw_pokemon())

    assert isinstance(pokemon, Pokemon)
    assert pokemon.id == PokemonId(6)
    assert pokemon.name == PokemonName("charizard")
    assert pokemon.image_url == "https://example.test/artwork/6.png"
    assert pokemon.stats.special_attack == 109
    assert pokemon.stats.total == 534


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_required_field_is_named(mapper, make_raw_pokemon, field):
    data = make_raw_pokemon()
    del data[field]

    with pytest.raises(MappingError) as excinfo:
        mapper.map_to_pokemon(data)

    assert excinfo.value.field == field
    assert field in str(excinfo.value)


def test_null_required_field_counts_as_missing(mapper, make_raw_pokemon):
    with pytest.raises(MappingError) as excinfo:
        mapper.map_to_pokemon(make_raw_pokemon(sprites=None))

    assert excinfo.value.field == "sprites"

# --- units ---

@pytest.mark.parametrize("raw, expected", [(4, 0.4), (17, 1.7), (60, 6.0), (0, 0.0)])
def test_height_is_converted_from_decimeters(mapper, make_raw_pokemon, raw, expected):
    assert mapper.map_to_pokemon(make_raw_pokemon(height=raw)).height == expected


@pytest.mark.parametrize("raw, expected", [(905, 90.5), (60, 6.0), (1, 0.1)])
def test_weight_is_converted_from_hectograms(mapper, make_raw_pokemon, raw, expected):
    assert mapper.map_to_pokemon(make_raw_pokemon(weight=raw)).weight == expected


def test_formatted_measurements(mapper, make_raw_pokemon):
    pokemon = mapper.map_to_pokemon(make_raw_pokemon(height=4, weight=60))

    assert pokemon.formatted_height() == "0.4 m"
    assert pokemon.formatted_weight() == "6.0 kg"


def test_non_numeric_height_is_a_mapping_error(mapper, make_raw_pokemon):
    with pytest.raises(MappingError) as excinfo:
        mapper.map_to_pokemon(make_raw_pokemon(height="seventeen"))

    assert excinfo.value.field == "height"

# --- image ---

def test_image_falls_back_to_front_default(mapper, make_raw_pokemon):
    data = make_raw_pokemon(sprites={"front_default": "https://example.test/sprites/6.png", "other": {}})

    assert mapper.map_to_pokemon(data).image_url == "https://example.test/sprites/6.png"


def test_image_falls_back_when_artwork_is_null(mapper, make_raw_pokemon):
    data = make_raw_pokemon(
        sprites={"front_default": "front.png", "other": {"official-artwork": {"front_default": None}}}
    )

    assert mapper.map_to_pokemon(data).image_url == "front.png"


def test_missing_images_give_empty_string(mapper, make_raw_pokemon):
    data = make_raw_pokemon(sprites={"front_default": None})

    assert mapper.map_to_pokemon(data).image_url == ""

# --- types ---

def test_types_keep_declared_order(mapper, make_raw_pokemon):
    pokemon = mapper.map_to_pokemon(make_raw_pokemon())

    assert [t.value for t in pokemon.types] == ["fire", "flying"]
    assert pokemon.types[0].color == "#F08030"


def test_unknown_type_is_skipped(mapper, make_raw_pokemon):
    data = make_raw_pokemon(types=[{"type": {"name": "shadow"}}, {"type": {"name": "ghost"}}])

    pokemon = mapper.map_to_pokemon(data)

    assert pokemon.types == (PokemonType("ghost"),)


def test_malformed_type_entries_are_skipped(mapper, make_raw_pokemon):
    data = make_raw_pokemon(types=[{"slot": 1}, "water", {"type": {"name": "Water"}}])

    assert [t.value for t in mapper.map_to_pokemon(data).types] == ["water"]


def test_duplicate_types_are_kept(mapper, make_raw_pokemon):
    data = make_raw_pokemon(types=[{"type": {"name": "fire"}}, {"type": {"name": "fire"}}])

    assert [t.value for t in mapper.map_to_pokemon(data).types] == ["fire", "fire"]


def test_types_that_are_not_a_list_map_to_no_types(mapper, make_raw_pokemon):
    assert mapper.map_to_pokemon(make_raw_pokemon(types={"oops": True})).types == ()

# --- stats ---

def test_missing_stats_default_to_zero(mapper, make_raw_pokemon):
    data = make_raw_pokemon(stats=[{"base_stat": 50, "stat": {"name": "hp"}}, {"stat": {"name": "speed"}}])

    stats = mapper.map_to_pokemon(data).stats

    assert stats.hp == 50
    assert stats.speed == 0
    assert stats.attack == 0
    assert stats.total == 50


def test_out_of_range_stat_propagates(mapper, make_raw_pokemon):
    data = make_raw_pokemon(stats=[{"base_stat": 300, "stat": {"name": "attack"}}])

    with pytest.raises(ValidationError) as excinfo:
        mapper.map_to_pokemon(data)

    assert "attack" in str(excinfo.value)


def test_stats_that_are_not_a_list_fail(mapper, make_raw_pokemon):
    with pytest.raises(MappingError) as excinfo:
        mapper.map_to_pokemon(make_raw_pokemon(stats={"hp": 10}))

    assert excinfo.value.field == "stats"


@pytest.mark.parametrize("stat_name", [["hp"], {"name": "hp"}, 7])
def test_stat_name_that_is_not_a_string_fails(mapper, make_raw_pokemon, stat_name):
    data = make_raw_pokemon(stats=[{"base_stat": 1, "stat": {"name": stat_name}}])

    with pytest.raises(MappingError) as excinfo:
        mapper.map_to_pokemon(data)

    assert excinfo.value.field == "stats"

# --- identity ---

def test_invalid_id_propagates(mapper, make_raw_pokemon):
    with pytest.raises(ValidationError):
        mapper.map_to_pokemon(make_raw_pokemon(id=0))


def test_entity_is_immutable(mapper, make_raw_pokemon):
    pokemon = mapper.map_to_pokemon(make_raw_pokemon())

    with pytest.raises(ValidationError):
        pokemon.height = 2.0

    taller = pokemon.model_copy(update={"height": 2.0})
    assert taller.height == 2.0
    assert pokemon.height == 1.7
