from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_FILE = Path.cwd() / ".env"


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    GATEWAYAPI_TOKEN: Optional[str] = Field(default=None)

    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE_PATH: Optional[str] = Field(default=None)

    @field_validator("GATEWAYAPI_TOKEN", mode="before")
    @classmethod
    def blank_token_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str):
            v = v.strip().strip('"\'')
            return v or None
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    load_dotenv(ENV_FILE)
    return Settings()
