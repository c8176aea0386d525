import httpx
import logging
from urllib.parse import quote
from pydantic import ValidationError
from app.config import DEFAULT_POKEAPI_BASE_URL
from app.errors import NotFoundError, UpstreamParseError
from app.models import PokeAPIPokemon

logger = logging.getLogger(__name__)

class PokeAPIClient:
    def __init__(
        self,
        base_url: str = DEFAULT_POKEAPI_BASE_URL,
        timeout: float = 5.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        # An injected client wins over base_url/timeout (custom transports in tests)
        if http_client is None:
            http_client = httpx.AsyncClient(base_url=base_url.rstrip("/"), timeout=timeout)
        self.client = http_client

    async def fetch_pokemon(self, name: str) -> dict:
        """Fetches the raw pokemon resource. Any failure to get a 2xx answer is a 'not found'."""
        # The name is a single path segment; "?", "#" and "/" must not reshape the URL
        url = f"/pokemon/{quote(name, safe='')}"

        try:
            response = await self.client.get(url)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
        except httpx.HTTPStatusError as e:
            logger.warning(f"PokeAPI returned status {e.response.status_code} for: {name}")
            raise NotFoundError(name)
        except httpx.RequestError as e:
            logger.error(f"PokeAPI network error for {name}: {str(e)}")
            raise NotFoundError(name)

        try:
            return response.json()
        except ValueError:
            logger.error(f"PokeAPI returned a non-JSON body for: {name}")
            raise UpstreamParseError()

    async def get_pokemon(self, name: str) -> PokeAPIPokemon:
        """Fetches the pokemon resource and validates the fields we consume."""
        data = await self.fetch_pokemon(name)

        try:
            return PokeAPIPokemon.model_validate(data)
        except ValidationError as e:
            logger.error(f"PokeAPI response for {name} has an unexpected shape: {e.error_count()} error(s)")
            raise UpstreamParseError()

    async def close(self):
        """Close the HTTP client (call on app shutdown)."""
        await self.client.aclose()
