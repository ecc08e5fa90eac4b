"""Newscheck configuration — loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- Server ---------------------------------------------------------
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    # --- Access ---------------------------------------------------------
    internal_token: str = ""  # shared secret for POST /check; empty disables the check
    allowed_origins: str = "*"  # comma-separated origins, e.g. "http://localhost:3000,https://app.example.com"

    # --- Input ----------------------------------------------------------
    max_text_length: int = 50_000


settings = Settings()
