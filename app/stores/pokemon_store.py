import logging
import redis.asyncio as aioredis
from app.config import DEFAULT_REDIS_URL
from app.models import PokemonRecord

logger = logging.getLogger(__name__)

class PokemonStore:
    """Redis-backed record store, one JSON document per normalized Pokemon name.

    Records are written once and never expire.
    """
    KEY_PREFIX = "pokemon:record:"

    def __init__(self, redis_url: str = DEFAULT_REDIS_URL, redis: aioredis.Redis | None = None):
        if redis is None:
            redis = aioredis.from_url(redis_url, decode_responses=True)
        self.redis = redis

    def _key(self, name: str) -> str:
        return f"{self.KEY_PREFIX}{name}"

    async def get(self, name: str) -> PokemonRecord | None:
        raw = await self.redis.get(self._key(name))
        if raw is None:
            return None
        return PokemonRecord.model_validate_json(raw)

    async def create(self, record: PokemonRecord) -> bool:
        """Stores the record only if none exists for its name. Returns False when one already did."""
        created = await self.redis.set(self._key(record.name), record.model_dump_json(), nx=True)
        if created:
            logger.info(f"Stored record for Pokemon: {record.name}")
        return bool(created)

    async def count(self) -> int:
        keys = await self.redis.keys(f"{self.KEY_PREFIX}*")
        return len(keys)

    async def clear(self):
        """Delete every stored record. Useful for testing."""
        keys = await self.redis.keys(f"{self.KEY_PREFIX}*")
        if keys:
            await self.redis.delete(*keys)

    async def close(self):
        """Close Redis connection (call on app shutdown)."""
        await self.redis.aclose()
