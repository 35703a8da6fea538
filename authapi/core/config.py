"""Application configuration loaded from environment variables."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# bcrypt accepts cost factors 4..31 (log2 of the number of rounds).
BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Cost factor passed to bcrypt.gensalt for new registrations
    BCRYPT_ROUNDS: int = 10

    # Origins allowed by the CORS middleware; "*" opens the API to any origin
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(
                "LOG_LEVEL must be a logging level name (e.g. DEBUG, INFO, WARNING)"
            )
        return level

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < BCRYPT_MIN_ROUNDS or v > BCRYPT_MAX_ROUNDS:
            raise ValueError(
                f"BCRYPT_ROUNDS must be between {BCRYPT_MIN_ROUNDS} and {BCRYPT_MAX_ROUNDS}"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
