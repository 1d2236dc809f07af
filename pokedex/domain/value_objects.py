from pydantic import BaseModel, ConfigDict, ValidationInfo, computed_field, field_validator

MAX_NAME_LENGTH = 100
MIN_STAT = 0
MAX_STAT = 255

# Valid Pokemon types with their colors for UI
TYPE_COLORS = {
    "normal": "#A8A878",
    "fire": "#F08030",
    "water": "#6890F0",
    "electric": "#F8D030",
    "grass": "#78C850",
    "ice": "#98D8D8",
    "fighting": "#C03028",
    "poison": "#A040A0",
    "ground": "#E0C068",
    "flying": "#A890F0",
    "psychic": "#F85888",
    "bug": "#A8B820",
    "rock": "#B8A038",
    "ghost": "#705898",
    "dragon": "#7038F8",
    "dark": "#705848",
    "steel": "#B8B8D0",
    "fairy": "#EE99AC",
}


def _capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def is_numeric_identifier(text: str) -> bool:
    """True when the text (ignoring surrounding whitespace) is made of ASCII digits only."""
    stripped = text.strip()
    return stripped.isascii() and stripped.isdigit()


# Value objects are frozen and strict: invalid input fails construction
# instead of being coerced (e.g. "25" is not accepted as an id).
class PokemonId(BaseModel):
    """A valid (positive) Pokemon ID."""

    model_config = ConfigDict(frozen=True, strict=True)

    value: int

    def __init__(self, value: int, **data):
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def _must_be_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Pokemon ID must be a positive integer")
        return value

    def __str__(self) -> str:
        return str(self.value)


class PokemonName(BaseModel):
    """
    A valid Pokemon name.
    Stored trimmed and lowercased, so equality is case-insensitive.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    value: str

    def __init__(self, value: str, **data):
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def _normalize(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("Pokemon name cannot be empty")
        if len(trimmed) > MAX_NAME_LENGTH:
            raise ValueError("Pokemon name is too long")
        return trimmed.lower()

    def equals(self, other: "PokemonName") -> bool:
        return self == other

    def formatted(self) -> str:
        """Display form: first character upper-cased."""
        return _capitalize_first(self.value)

    def __str__(self) -> str:
        return self.value


class PokemonType(BaseModel):
    """One of the 18 known Pokemon types (fire, water, grass...)."""

    model_config = ConfigDict(frozen=True, strict=True)

    value: str

    def __init__(self, value: str, **data):
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def _must_be_known(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("Pokemon type cannot be empty")
        if normalized not in TYPE_COLORS:
            raise ValueError(f"Invalid Pokemon type: {value}")
        return normalized

    @property
    def color(self) -> str:
        return TYPE_COLORS[self.value]

    def formatted(self) -> str:
        return _capitalize_first(self.value)

    def __str__(self) -> str:
        return self.value


class PokemonStats(BaseModel):
    """Base battle statistics, each within 0..255."""

    model_config = ConfigDict(frozen=True, strict=True)

    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int

    @field_validator("hp", "attack", "defense", "special_attack", "special_defense", "speed")
    @classmethod
    def _must_be_in_range(cls, value: int, info: ValidationInfo) -> int:
        if not MIN_STAT <= value <= MAX_STAT:
            raise ValueError(
                f"{info.field_name} must be between {MIN_STAT} and {MAX_STAT}, got {value}"
            )
        return value

    @computed_field
    @property
    def total(self) -> int:
        return (
            self.hp
            + self.attack
            + self.defense
            + self.special_attack
            + self.special_defense
            + self.speed
        )

    def to_dict(self) -> dict[str, int]:
        """The six stats plus the total, keyed by field name."""
        return self.model_dump()
