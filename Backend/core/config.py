# core/config.py

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()  # ← Must run before any os.getenv below


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    default_language: str = "English"
    log_level: str = "INFO"
    log_file: str | None = None


def load_settings() -> Settings:
    """Read the settings from the environment (.env already loaded)."""
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        default_language=os.getenv("DEFAULT_LANGUAGE", "English"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )
