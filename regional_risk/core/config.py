# regional_risk/core/config.py
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[2]
PACKAGE_DIR = Path(__file__).resolve().parents[1]

load_dotenv(ROOT / ".env")


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(key)
    if val is None or val.strip() == "":
        return default
    return val.strip()


def _float_env(key: str, default: float) -> float:
    try:
        return float(_env(key, str(default)))
    except ValueError:
        return default


def _int_env(key: str, default: int) -> int:
    try:
        return int(_env(key, str(default)))
    except ValueError:
        return default


@dataclass
class Settings:
    DATA_PATH: Path = field(
        default_factory=lambda: Path(_env("REGIONS_DATA_PATH", str(PACKAGE_DIR / "data" / "regions.json")))
    )
    GEMINI_API_KEY: Optional[str] = field(default_factory=lambda: _env("GEMINI_API_KEY"))
    # flash-lite keeps us inside the free-tier quota
    GEMINI_MODEL: str = field(default_factory=lambda: _env("GEMINI_MODEL", "gemini-2.0-flash-lite"))
    GEMINI_BASE_URL: str = field(
        default_factory=lambda: _env("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
    )
    TEMPERATURE: float = field(default_factory=lambda: _float_env("GEMINI_TEMPERATURE", 0.7))
    MAX_OUTPUT_TOKENS: int = field(default_factory=lambda: _int_env("GEMINI_MAX_OUTPUT_TOKENS", 300))
    REQUEST_TIMEOUT: float = field(default_factory=lambda: _float_env("GEMINI_REQUEST_TIMEOUT", 30.0))
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    HOST: str = field(default_factory=lambda: _env("HOST", "127.0.0.1"))
    PORT: int = field(default_factory=lambda: _int_env("PORT", 8000))

    @property
    def gemini_url(self) -> str:
        return f"{self.GEMINI_BASE_URL.rstrip('/')}/models/{self.GEMINI_MODEL}:generateContent"


settings = Settings()
