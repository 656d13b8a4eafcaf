"""
Client configuration via environment variables.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

from jobo import __version__

DEFAULT_BASE_URL = "https://api.jobo.ai"
DEFAULT_TIMEOUT_S = 30.0
DEFAULT_USER_AGENT = f"jobo-python/{__version__}"


class JoboSettings(BaseSettings):
    """Client settings loaded from JOBO_* environment variables."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_api_key(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/") or DEFAULT_BASE_URL

    @property
    def is_configured(self) -> bool:
        """Check if an API key is set."""
        return bool(self.api_key)

    class Config:
        env_prefix = "JOBO_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> JoboSettings:
    """Get cached settings instance."""
    return JoboSettings()
