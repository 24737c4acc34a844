from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LOYALTY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = "development"
    service_name: str = "petwash-loyalty"
    version: str = "0.1.0"
    log_level: str = "INFO"

    # Tier configuration; the bundled default table is used when unset
    tier_table_path: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        if value is None:
            return "INFO"
        return str(value).strip().upper() or "INFO"

    @field_validator("tier_table_path", mode="before")
    @classmethod
    def _blank_path_is_unset(cls, value: object) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]
