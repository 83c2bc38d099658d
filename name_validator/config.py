from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_USERS_PATH = PROJECT_ROOT / "data" / "users.json"


class Settings(BaseSettings):
    """Runtime configuration, read from the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    validation_url: str = Field(
        default="https://schoolbaseapp.com/validate-name", alias="VALIDATION_URL"
    )
    users_path: Path = Field(default=DEFAULT_USERS_PATH, alias="USERS_PATH")
    # None keeps the httpx client default
    remote_timeout: Optional[float] = Field(default=None, alias="REMOTE_TIMEOUT")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
