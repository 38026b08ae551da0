# File: primerpair/app/core/config.py
# Version: v0.1.0
"""
Centralized application settings using Pydantic Settings.

Controls:
- App metadata and API prefix
- Log level for the CLI / API process
- Search defaults (Tm method, nearest-Tm window, result cap, ΔTm weight)

Every field can be overridden by an environment variable of the same name,
e.g. `PAIR_SEARCH_WINDOW=250`.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- App ---
    APP_NAME: str = "primerpair"
    APP_VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    # --- Search defaults ---
    TM_METHOD: str = "NN"  # NN | PRIMER3 | Wallace
    PAIR_SEARCH_WINDOW: int = Field(100, ge=0)
    MAX_PAIR_RESULTS: int = Field(50, ge=1)
    TM_DELTA_WEIGHT: float = 1.0

    # - extra="allow": unrelated env vars won't crash
    # - env_file=None: do NOT auto-load any .env
    model_config = SettingsConfigDict(
        extra="allow",
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
