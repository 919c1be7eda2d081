from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
    )

    # --- Catalog ---
    wheels_file: Optional[str] = Field(default=None, alias="WHEELS_FILE")

    # --- Seeded (test-only) spins ---
    allow_seeded_spins: bool = Field(default=False, alias="ALLOW_SEEDED_SPINS")
    seed_hash_algorithm: str = Field(default="sha256", alias="SEED_HASH_ALGORITHM")

    # --- Internal API ---
    internal_api_token: str = Field(default="", alias="INTERNAL_API_TOKEN")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


settings = Settings()
