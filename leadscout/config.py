"""Application configuration helpers."""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv
from loguru import logger

DEFAULT_MODEL = "gemini-3-flash-preview"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = ""
    model: str = DEFAULT_MODEL
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables (and a local .env file)."""
    load_dotenv()

    # API_KEY is the name the hosted original of this form read.
    gemini_api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
    model = os.getenv("LEADSCOUT_MODEL", "").strip() or DEFAULT_MODEL
    log_level = os.getenv("LEADSCOUT_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    if not gemini_api_key:
        logger.warning("GEMINI_API_KEY is not configured; lead searches will fail.")

    return Settings(
        gemini_api_key=gemini_api_key.strip(),
        model=model,
        log_level=log_level,
    )
