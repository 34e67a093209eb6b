"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks PARTIAL_EVAL_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Limit głębokości drzew przyjmowanych z zewnątrz (API, CLI)
    max_expression_depth: int = 200

    # App
    app_title: str = "PartialEval"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="PARTIAL_EVAL_", env_file=".env", extra="ignore")
