import pytest
from fakeredis.aioredis import FakeRedis
from app.models import PokemonRecord
from app.stores.pokemon_store import PokemonStore


BULBASAUR = PokemonRecord(
    id=1,
    name="bulbasaur",
    height=7,
    weight=69,
    sprite_url="https://img.pokemondb.net/sprites/bulbasaur.png",
    abilities=["overgrow"],
    types=["grass", "poison"],
)

@pytest.fixture
def redis_client():
    """Provides a fake Redis client for testing."""
    return FakeRedis(decode_responses=True)

@pytest.fixture
def store(redis_client):
    return PokemonStore(redis=redis_client)

@pytest.mark.asyncio
async def test_get_unknown_name_returns_none(store):
    assert await store.get("bulbasaur") is None

@pytest.mark.asyncio
async def test_create_then_get_round_trips_record(store):
    assert await store.create(BULBASAUR) is True

    result = await store.get("bulbasaur")

    assert result == BULBASAUR
    assert result.types == ["grass", "poison"]

@pytest.mark.asyncio
async def test_create_is_create_only(store):
    """A second create for the same name is rejected and keeps the first record."""
    assert await store.create(BULBASAUR) is True

    changed = BULBASAUR.model_copy(update={"weight": 1000})
    assert await store.create(changed) is False

    assert (await store.get("bulbasaur")).weight == 69
    assert await store.count() == 1

@pytest.mark.asyncio
async def test_records_never_expire(store, redis_client):
    await store.create(BULBASAUR)

    # -1 means the key exists without a TTL
    assert await redis_client.ttl("pokemon:record:bulbasaur") == -1

@pytest.mark.asyncio
async def test_clear_removes_only_records(store, redis_client):
    await store.create(BULBASAUR)
    await redis_client.set("unrelated:key", "value")

    await store.clear()

    assert await store.count() == 0
    assert await redis_client.get("unrelated:key") == "value"
