"""Application settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from the environment (PLAYER_AUTH_*) or .env."""

    model_config = SettingsConfigDict(
        env_prefix="PLAYER_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = "sqlite:///./data/player_auth.db"

    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"

    # Regenerate this many times when a fresh code collides with another player's
    max_issue_attempts: int = Field(default=10, ge=1)


settings = Settings()
