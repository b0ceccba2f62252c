from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # DNS-over-HTTPS resolver (JSON API)
    doh_url: str = Field(default="https://cloudflare-dns.com/dns-query")
    doh_timeout: int = Field(default=300)  # aiohttp's own default total timeout

    # Report resolver failures as an invalid verdict instead of a 502
    dns_failure_as_invalid: bool = Field(default=False)

    # Application
    debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
