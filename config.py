"""
Configuration settings for the Random Combo Finder
Loads environment variables and provides application settings
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Configuration
    environment: str = Field(default="production")
    port: int = Field(default=8000)

    # Logging
    log_level: str = Field(default="INFO")

    # External Services
    # Scryfall doesn't require an API key for autocomplete and named lookups
    scryfall_base_url: str = Field(default="https://api.scryfall.com")
    # Where the combo client reaches the spellbook proxy (usually this app)
    proxy_base_url: str = Field(default="http://localhost:8000")
    # Upstream GraphQL endpoint the proxy forwards to
    spellbook_graphql_url: str = Field(default="https://backend.commanderspellbook.com/graphql")

    # Timeout Configuration
    external_api_timeout: int = Field(default=25)  # 25 seconds max
    external_api_connect_timeout: int = Field(default=8)  # 8 seconds max
    external_api_write_timeout: int = Field(default=8)  # 8 seconds max

    # CORS Configuration
    allowed_origins: list = Field(default=["*"])

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings"""
    return Settings()


# Global settings instance
settings = get_settings()
