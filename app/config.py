import logging
import os

from pydantic import BaseModel

DEFAULT_POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_REDIS_URL = "redis://localhost:6379"


class Settings(BaseModel):
    pokeapi_base_url: str = DEFAULT_POKEAPI_BASE_URL
    redis_url: str = DEFAULT_REDIS_URL
    http_timeout: float = 5.0
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Builds the settings from environment variables, falling back to defaults."""
    return Settings(
        pokeapi_base_url=os.getenv("POKEAPI_BASE_URL", DEFAULT_POKEAPI_BASE_URL).rstrip("/"),
        redis_url=os.getenv("REDIS_URL", DEFAULT_REDIS_URL),
        http_timeout=float(os.getenv("POKEAPI_TIMEOUT", "5.0")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
