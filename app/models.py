from pydantic import BaseModel, ConfigDict, Field


# Models for the raw Pokemon data fetched from PokeAPI (Internal Contract)
# Only the fields we consume are declared; everything else in the payload is ignored.
class NamedResource(BaseModel):
    name: str


class AbilitySlot(BaseModel):
    ability: NamedResource


class TypeSlot(BaseModel):
    type: NamedResource


class Sprites(BaseModel):
    front_default: str | None = None


class PokeAPIPokemon(BaseModel):
    id: int
    name: str
    height: int
    weight: int
    sprites: Sprites | None = None
    abilities: list[AbilitySlot]
    types: list[TypeSlot]


# Model for the locally persisted copy, keyed by the normalized name
class PokemonRecord(BaseModel):
    id: int
    name: str
    height: int
    weight: int
    sprite_url: str | None = None
    abilities: list[str] = Field(default_factory=list)
    types: list[str] = Field(default_factory=list)


# Model for the final API response (Public Endpoint)
class PokemonDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    height: int
    weight: int
    sprite_url: str | None = Field(default=None, alias="spriteUrl")
    abilities: list[str]
    types: list[str]

    @classmethod
    def from_record(cls, record: PokemonRecord) -> "PokemonDto":
        return cls(
            id=record.id,
            name=record.name,
            height=record.height,
            weight=record.weight,
            sprite_url=record.sprite_url,
            abilities=list(record.abilities),
            types=list(record.types),
        )


class ErrorResponse(BaseModel):
    detail: str
