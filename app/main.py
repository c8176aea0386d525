from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from app.config import configure_logging
from app.dependencies import close_dependencies, get_pokemon_service, get_settings
from app.errors import InvalidArgumentError
from app.models import ErrorResponse, PokemonDto
from app.services.pokemon_service import PokemonService


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().log_level)
    yield
    await close_dependencies()


app = FastAPI(
    title="Pokemon Lookup API",
    description="Looks up Pokemon on PokeAPI and keeps a local copy of every record it serves.",
    lifespan=lifespan,
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Empty Pokemon name"},
    404: {"model": ErrorResponse, "description": "Pokemon not found"},
    502: {"model": ErrorResponse, "description": "Unexpected PokeAPI response"},
}


@app.get(
    "/pokemon/{name}",
    response_model=PokemonDto,
    responses=ERROR_RESPONSES,
    summary="Returns basic Pokemon information",
)
async def get_pokemon(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Returns id, name, height, weight, sprite, first ability and types for a given Pokemon name."""
    # InvalidArgumentError, NotFoundError and UpstreamParseError are HTTPExceptions, FastAPI renders them
    return await service.lookup(name)


# "/pokemon/" never reaches the route above, the name segment is empty
@app.get("/pokemon/", include_in_schema=False)
async def get_pokemon_without_name():
    raise InvalidArgumentError()
