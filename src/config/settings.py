"""
Fair Dice - Application Settings

Loads configuration from environment variables using Pydantic Settings.
A local ``.env`` file is read when present.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Protocol
    hmac_digest: str = "sha3_256"
    secret_bytes: int = Field(default=32, ge=32)

    # Game
    min_dice_values: int = Field(default=3, ge=3)
    help_trials: int = Field(default=10000, gt=0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("hmac_digest")
    @classmethod
    def check_digest(cls, value: str) -> str:
        # src.engine imports this module, so resolve the validator lazily
        from src.engine.fair_random import validate_digest

        return validate_digest(value)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
