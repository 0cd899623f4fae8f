# src/lexcoll/config.py
"""
Settings from the environment (and a .env file, if present).

    GOOGLE_GEMINI_API_KEY     credential for generation (checked per request)
    LEXCOLL_MODEL             model name, default gemini-1.5-pro
    LEXCOLL_GEMINI_BASE_URL   OpenAI-compatible Gemini endpoint
    LEXCOLL_DATASET           path to a dataset JSON (default: bundled)
    LEXCOLL_API_URL           API base used by the CLI
    LEXCOLL_LOG_LEVEL         server log level
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


load_dotenv(override=False)

DEFAULT_MODEL = "gemini-1.5-pro"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_API_URL = "http://localhost:8000/api"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None = None
    model: str = DEFAULT_MODEL
    gemini_base_url: str = DEFAULT_GEMINI_BASE_URL
    dataset_path: Path | None = None
    api_url: str = DEFAULT_API_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        dataset = os.getenv("LEXCOLL_DATASET")
        return cls(
            gemini_api_key=os.getenv("GOOGLE_GEMINI_API_KEY") or None,
            model=os.getenv("LEXCOLL_MODEL", DEFAULT_MODEL),
            gemini_base_url=os.getenv("LEXCOLL_GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL),
            dataset_path=Path(dataset) if dataset else None,
            api_url=os.getenv("LEXCOLL_API_URL", DEFAULT_API_URL).rstrip("/"),
            log_level=os.getenv("LEXCOLL_LOG_LEVEL", "INFO").upper(),
        )


def get_settings() -> Settings:
    return Settings.from_env()
