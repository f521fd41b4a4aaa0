# invoicing/config.py

from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = Field(default="Invoicing API")
    # SQLite or PostgreSQL; the stores rely on ON CONFLICT upserts.
    database_url: str = Field(default="sqlite:///db.sqlite")
    seed_example_data: bool = Field(default=True)
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: [
            "http://localhost:5000",
            "http://127.0.0.1:5000",
        ]
    )
    currency_symbol: str = Field(default="₹")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_prefix="INVOICING_", case_sensitive=False)

    @field_validator("cors_origins", mode="before")
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
