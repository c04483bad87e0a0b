from functools import lru_cache
from typing import Optional

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from currencyapi import __version__


class Settings(BaseSettings):
    """Client settings loaded from environment with defaults.

    Environment variable mapping uses the CURRENCYAPI_ prefix (e.g. CURRENCYAPI_API_KEY,
    CURRENCYAPI_BASE_URL, CURRENCYAPI_HTTP_TIMEOUT_SECONDS, CURRENCYAPI_DEBUG).
    """

    model_config = SettingsConfigDict(
        env_prefix="CURRENCYAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Authentication
    api_key: Optional[str] = None

    # Remote endpoint
    base_url: AnyHttpUrl = "https://api.currencyapi.com/v3/"
    http_timeout_seconds: float = Field(10.0, gt=0)
    user_agent: Optional[str] = None

    debug: bool = False

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    def effective_user_agent(self) -> str:
        return self.user_agent or f"currencyapi-python/{__version__}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
