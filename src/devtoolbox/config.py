"""Configuration and environment loading for DevToolbox."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Registry
    validate_on_startup: bool = True
    revalidate_on_add: bool = False  # Re-run validation after each add_one
    disabled_tools: list[str] = []  # Built-in tool ids to skip at startup


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
