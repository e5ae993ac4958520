"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Record store
    STORE_BACKEND: Literal["memory", "supabase"] = "memory"

    # Supabase (only read when STORE_BACKEND=supabase)
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    CANDIDATES_TABLE: str = "candidates"

    # Pagination
    DEFAULT_PAGE_LIMIT: int = 20

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()
