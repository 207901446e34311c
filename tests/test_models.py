import pytest

from pokecache.models import (
    InvalidPokemonTypeError,
    Pokemon,
    PokemonAbility,
    PokemonType,
    parse_pokemon_type,
    pokemon_type_names,
)


def _sample():
    return Pokemon(
        id=12,
        name="Bulbasaur",
        type=PokemonType.FIGHTING,
        height=123,
        weight=4567,
        abilities=[PokemonAbility("Jazz Dance", "Dancey dance!", 12)],
    )


def test_type_names_in_declaration_order():
    assert pokemon_type_names() == [
        "Normal", "Fire", "Water", "Electric", "Grass", "Ice", "Fighting", "Poison",
        "Ground", "Flying", "Psychic", "Bug", "Rock", "Ghost", "Dragon", "Dark",
        "Steel", "Fairy",
    ]


def test_type_names_returns_a_copy():
    names = pokemon_type_names()
    names.clear()
    assert len(pokemon_type_names()) == len(PokemonType)


@pytest.mark.parametrize("text", ["Ghost", "ghost", "GHOST", "gHoSt"])
def test_parse_is_case_insensitive(text):
    assert parse_pokemon_type(text) is PokemonType.GHOST


def test_every_name_parses_back_to_its_member():
    for member in PokemonType:
        assert parse_pokemon_type(str(member)) is member


@pytest.mark.parametrize("text", ["", "Plasma", "fire "])
def test_parse_rejects_unknown_names(text):
    with pytest.raises(InvalidPokemonTypeError, match="not a valid PokemonType"):
        parse_pokemon_type(text)


def test_invalid_type_error_is_value_error():
    with pytest.raises(ValueError):
        parse_pokemon_type("Cosmic")


def test_pokemon_round_trip():
    pokemon = _sample()
    assert Pokemon.from_dict(pokemon.to_dict()) == pokemon


def test_to_dict_field_values():
    data = _sample().to_dict()
    assert list(data) == ["id", "name", "type", "height", "weight", "abilities"]
    assert data["type"] == "Fighting"
    assert data["abilities"] == [
        {"name": "Jazz Dance", "description": "Dancey dance!", "generation": 12}
    ]


def test_abilities_are_stored_as_tuple():
    pokemon = _sample()
    assert pokemon.abilities == (PokemonAbility("Jazz Dance", "Dancey dance!", 12),)


def test_missing_and_null_fields_take_defaults():
    assert Pokemon.from_dict({"name": "Spinoza", "height": None}) == Pokemon(name="Spinoza")
    assert Pokemon.from_dict(None) == Pokemon()
    assert PokemonAbility.from_dict(None) == PokemonAbility()


def test_field_names_match_case_insensitively():
    pokemon = Pokemon.from_dict({"ID": 5, "Name": "Alice", "TYPE": "bug"})
    assert (pokemon.id, pokemon.name, pokemon.type) == (5, "Alice", PokemonType.BUG)


def test_unknown_fields_are_ignored():
    assert Pokemon.from_dict({"id": 7, "colour": "blue"}) == Pokemon(id=7)


@pytest.mark.parametrize(
    "data",
    [
        {"id": -1},
        {"id": 1.5},
        {"id": True},
        {"id": "12"},
        {"height": 2**32},
        {"weight": 2**64},
        {"name": 5},
        {"type": 3},
        {"type": "Plasma"},
        {"abilities": {}},
        {"abilities": [{"generation": 256}]},
        {"abilities": [5]},
    ],
)
def test_from_dict_rejects_bad_values(data):
    with pytest.raises(ValueError):
        Pokemon.from_dict(data)


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        Pokemon.from_dict([1, 2])


def test_limits_are_inclusive():
    pokemon = Pokemon.from_dict({"id": 2**64 - 1, "height": 2**32 - 1})
    assert pokemon.id == 2**64 - 1
    assert pokemon.height == 2**32 - 1