"""Pokemon records, the closed set of Pokemon types, and their JSON mapping."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping

_UINT8_MAX = 2**8 - 1
_UINT32_MAX = 2**32 - 1
_UINT64_MAX = 2**64 - 1

_MISSING = object()


class InvalidPokemonTypeError(ValueError):
    """Raised when a string names no known Pokemon type."""


class PokemonType(str, enum.Enum):
    """The elemental type of a Pokemon."""

    NORMAL = "Normal"
    FIRE = "Fire"
    WATER = "Water"
    ELECTRIC = "Electric"
    GRASS = "Grass"
    ICE = "Ice"
    FIGHTING = "Fighting"
    POISON = "Poison"
    GROUND = "Ground"
    FLYING = "Flying"
    PSYCHIC = "Psychic"
    BUG = "Bug"
    ROCK = "Rock"
    GHOST = "Ghost"
    DRAGON = "Dragon"
    DARK = "Dark"
    STEEL = "Steel"
    FAIRY = "Fairy"

    def __str__(self) -> str:
        return self.value


_TYPE_NAMES = tuple(member.value for member in PokemonType)
_TYPE_LOOKUP = {
    **{member.value: member for member in PokemonType},
    **{member.value.lower(): member for member in PokemonType},
}


def pokemon_type_names() -> list[str]:
    """Return the names of all Pokemon types, in declaration order."""
    return list(_TYPE_NAMES)


def parse_pokemon_type(name: str) -> PokemonType:
    """Parse a type name, case-insensitively."""
    if isinstance(name, PokemonType):
        return name
    found = _TYPE_LOOKUP.get(name) or _TYPE_LOOKUP.get(name.lower())
    if found is None:
        raise InvalidPokemonTypeError(
            f"{name} is not a valid PokemonType, try [{', '.join(_TYPE_NAMES)}]"
        )
    return found


def _field(data: Mapping[str, Any], key: str) -> Any:
    """Look a key up the way JSON object fields match: case-insensitively, last one wins."""
    found = _MISSING
    for candidate, value in data.items():
        if candidate.casefold() == key:
            found = value
    return _MISSING if found is None else found


def _uint(value: Any, limit: int, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= limit:
        raise ValueError(f"cannot decode {value!r} into field {label}")
    return value


def _string(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {value!r} into field {label}")
    return value


def _mapping(data: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"cannot decode {data!r} into {label}")
    return data


@dataclass(frozen=True)
class PokemonAbility:
    """A named ability and the generation that introduced it."""

    name: str = ""
    description: str = ""
    generation: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "generation": self.generation,
        }

    @classmethod
    def from_dict(cls, data: Any) -> PokemonAbility:
        """Build an ability from decoded JSON; absent or null fields keep their defaults."""
        if data is None:
            return cls()
        data = _mapping(data, "PokemonAbility")
        values: dict[str, Any] = {}
        if (name := _field(data, "name")) is not _MISSING:
            values["name"] = _string(name, "PokemonAbility.name")
        if (description := _field(data, "description")) is not _MISSING:
            values["description"] = _string(description, "PokemonAbility.description")
        if (generation := _field(data, "generation")) is not _MISSING:
            values["generation"] = _uint(generation, _UINT8_MAX, "PokemonAbility.generation")
        return cls(**values)


@dataclass(frozen=True)
class Pokemon:
    """One Pokemon record."""

    id: int = 0
    name: str = ""
    type: PokemonType | None = None
    height: int = 0
    weight: int = 0
    abilities: tuple[PokemonAbility, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "abilities", tuple(self.abilities))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value if self.type is not None else "",
            "height": self.height,
            "weight": self.weight,
            "abilities": [ability.to_dict() for ability in self.abilities],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        """Build a Pokemon from decoded JSON; absent or null fields keep their defaults."""
        if data is None:
            return cls()
        data = _mapping(data, "Pokemon")
        values: dict[str, Any] = {}
        if (pokemon_id := _field(data, "id")) is not _MISSING:
            values["id"] = _uint(pokemon_id, _UINT64_MAX, "Pokemon.id")
        if (name := _field(data, "name")) is not _MISSING:
            values["name"] = _string(name, "Pokemon.name")
        if (type_name := _field(data, "type")) is not _MISSING:
            values["type"] = parse_pokemon_type(_string(type_name, "Pokemon.type"))
        if (height := _field(data, "height")) is not _MISSING:
            values["height"] = _uint(height, _UINT32_MAX, "Pokemon.height")
        if (weight := _field(data, "weight")) is not _MISSING:
            values["weight"] = _uint(weight, _UINT64_MAX, "Pokemon.weight")
        if (abilities := _field(data, "abilities")) is not _MISSING:
            if not isinstance(abilities, list):
                raise ValueError(f"cannot decode {abilities!r} into field Pokemon.abilities")
            values["abilities"] = tuple(PokemonAbility.from_dict(item) for item in abilities)
        return cls(**values)