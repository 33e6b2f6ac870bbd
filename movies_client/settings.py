from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Movie service
    MOVIES_BASE_URL: str = Field(default="http://localhost:8081")
    MOVIES_TIMEOUT: float = Field(default=12.0, gt=0)
    MOVIES_CONNECT_TIMEOUT: float = Field(default=5.0, gt=0)
    # Deadline for the blocking wait; None waits on httpx's own timeouts
    MOVIES_CALL_TIMEOUT: float | None = Field(default=None, gt=0)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()  # type: ignore[call-arg]
