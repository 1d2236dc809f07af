import logging
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """
    Service configuration, read from ``POKEDEX_*`` environment variables.
    ``REDIS_URL`` is honoured as well for the cache connection.
    """

    model_config = SettingsConfigDict(env_prefix="POKEDEX_", frozen=True, populate_by_name=True)

    base_url: str = "https://pokeapi.co/api/v2"
    timeout: float = 30.0
    cache_ttl: int = 3600  # 1 hour
    cache_backend: Literal["redis", "memory"] = "redis"
    redis_url: str = Field(
        default="redis://localhost:6379",
        validation_alias=AliasChoices("POKEDEX_REDIS_URL", "REDIS_URL"),
    )
    max_retries: int = Field(default=3, ge=0)
    retry_backoff: float = Field(default=0.1, ge=0)  # seconds between attempts
    page_size: int = Field(default=20, ge=1)
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
