from app.clients import PokeAPIClient
from app.config import Settings, load_settings
from app.services import PokemonService
from app.stores import PokemonStore
from fastapi import Depends

_settings = None
_poke_client = None
_pokemon_store = None

def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings

def get_poke_client(settings: Settings = Depends(get_settings)) -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient(base_url=settings.pokeapi_base_url, timeout=settings.http_timeout)
    return _poke_client

def get_pokemon_store(settings: Settings = Depends(get_settings)) -> PokemonStore:
    global _pokemon_store
    if _pokemon_store is None:
        _pokemon_store = PokemonStore(redis_url=settings.redis_url)
    return _pokemon_store

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    store: PokemonStore = Depends(get_pokemon_store),
) -> PokemonService:
    return PokemonService(poke_client=poke_client, store=store)

async def close_dependencies():
    """Close whichever shared clients were created (call on app shutdown)."""
    global _poke_client, _pokemon_store
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None
    if _pokemon_store is not None:
        await _pokemon_store.close()
        _pokemon_store = None
