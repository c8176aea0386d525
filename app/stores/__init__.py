"""Local persistence for fetched Pokemon records."""
from .pokemon_store import PokemonStore

__all__ = [
    'PokemonStore',
]
