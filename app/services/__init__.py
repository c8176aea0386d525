"""Service layer orchestrating the store and the upstream client."""
from .pokemon_service import PokemonService, normalize_name

__all__ = [
    'PokemonService',
    'normalize_name',
]
