import logging
from app.clients.pokeapi_client import PokeAPIClient
from app.errors import InvalidArgumentError
from app.models import PokeAPIPokemon, PokemonDto, PokemonRecord
from app.stores.pokemon_store import PokemonStore

logger = logging.getLogger(__name__)


def normalize_name(name: str | None) -> str:
    """Lower-cased, trimmed name used as the store key and in the upstream URL."""
    normalized = (name or "").strip().lower()
    if not normalized:
        raise InvalidArgumentError()
    return normalized


def build_record(normalized_name: str, payload: PokeAPIPokemon) -> PokemonRecord:
    # Only the first ability (by position) is kept
    abilities = [payload.abilities[0].ability.name] if payload.abilities else []
    return PokemonRecord(
        id=payload.id,
        name=normalized_name,
        height=payload.height,
        weight=payload.weight,
        sprite_url=payload.sprites.front_default if payload.sprites else None,
        abilities=abilities,
        types=[slot.type.name for slot in payload.types],
    )


class PokemonService:
    # Store and upstream client are both injected
    def __init__(self, poke_client: PokeAPIClient, store: PokemonStore):
        self._poke_client = poke_client
        self._store = store

    async def lookup(self, name: str) -> PokemonDto:
        """
        Returns the stored record for the name, fetching and persisting it from PokeAPI on a miss.
        Stored records are never refreshed.
        """
        normalized_name = normalize_name(name)

        record = await self._store.get(normalized_name)
        if record is not None:
            logger.info(f"Cache hit for Pokemon: {normalized_name}")
            return PokemonDto.from_record(record)

        logger.info(f"Cache miss for Pokemon: {normalized_name}")
        payload = await self._poke_client.get_pokemon(normalized_name)
        record = build_record(normalized_name, payload)

        if not await self._store.create(record):
            # A concurrent lookup stored this name first; serve whatever won
            logger.info(f"Record for {normalized_name} already stored, keeping existing one")
            record = await self._store.get(normalized_name) or record

        return PokemonDto.from_record(record)
