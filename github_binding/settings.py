"""Client settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.github.com/"
DEFAULT_USER_AGENT = "github-binding"


class Settings(BaseSettings):
    """Defaults for a Client; explicit constructor arguments win."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None
    github_base_url: str = DEFAULT_BASE_URL
    github_user_agent: str = DEFAULT_USER_AGENT
    # Seconds; forwarded to httpx as the request timeout.
    github_timeout: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
