"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Defaults reproduce the fixed deployment: mongodb://localhost:27017,
      database "userinfo", collection "user", port 8000
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Connection timeout applies to startup only; CRUD calls carry no timeout
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    mongodb_url: str = "mongodb://localhost:27017"

    @field_validator("mongodb_url", mode="before")
    @classmethod
    def add_mongodb_scheme(cls, v: str) -> str:
        """Bare host:port values get the mongodb:// scheme."""
        if isinstance(v, str) and "://" not in v:
            return f"mongodb://{v}"
        return v

    mongodb_database: str = "userinfo"
    mongodb_collection: str = "user"
    mongodb_connect_timeout_seconds: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
