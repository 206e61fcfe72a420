from __future__ import annotations

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parent.parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    pricing_api_url: str = "https://sncftrenitaliadb.com/api/train/estimate/price"

    timezone: str = "Europe/Paris"
    log_level: str = "INFO"
    cache_ttl_seconds: int = 600
    http_timeout_seconds: float = 30.0
    http_retries: int = 1


def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
