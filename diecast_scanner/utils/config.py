"""Configuration and settings management."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator

from ..core import constants


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Collection matching
    SEARCH_THRESHOLD: float = constants.SEARCH_THRESHOLD
    MATCH_ACCEPT_SCORE: float = constants.MATCH_ACCEPT_SCORE

    # Exported collection used by the match and search commands
    COLLECTION_PATH: Optional[str] = None

    @field_validator('COLLECTION_PATH', mode='before')
    @classmethod
    def validate_collection_path(cls, v):
        """Convert empty/whitespace strings to None."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Convert empty/whitespace strings to default."""
        if isinstance(v, str) and not v.strip():
            return "INFO"
        return v

    @field_validator('LOG_FORMAT', mode='before')
    @classmethod
    def validate_log_format(cls, v):
        """Only 'json' and 'console' renderers exist; anything else is JSON."""
        if not isinstance(v, str):
            return "json"
        v = v.strip().lower()
        return v if v in ("json", "console") else "json"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }

# Global settings instance
settings = Settings()
