"""API configuration via environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    # Amadeus Self-Service credentials (unprefixed, as issued)
    amadeus_api_key: str = Field(default="", validation_alias="AMADEUS_API_KEY")
    amadeus_api_secret: str = Field(default="", validation_alias="AMADEUS_API_SECRET")
    amadeus_hostname: str = "test"  # "test" or "production"

    cors_origins: list[str] = ["http://localhost:3000"]

    # Airport autocomplete
    suggestion_cache_ttl: int = 300  # 5 min
    suggestion_cache_max_entries: int = 512
    suggestion_page_limit: int = 20

    # Flight search
    flight_max_results: int = 20
    default_currency: str = "USD"

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="SKYFINDER_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def has_amadeus_credentials(self) -> bool:
        return bool(self.amadeus_api_key and self.amadeus_api_secret)


settings = ApiSettings()
