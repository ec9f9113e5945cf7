"""Environment variable loading with defaults."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from doctranslate.languages import Lang

# Load .envdefault first (base defaults), then .env (overrides)
_base_dir = Path(__file__).resolve().parent.parent
load_dotenv(_base_dir / ".envdefault")
load_dotenv(_base_dir / ".env", override=True)

# Provider
TRANSLATION_PROVIDER: str = os.environ.get("TRANSLATION_PROVIDER", "google")

# Google Translate
GOOGLE_HOST: str = os.environ.get("GOOGLE_HOST", "translate.googleapis.com")
GOOGLE_TKK: str = os.environ.get("GOOGLE_TKK", "406398.2087938574")
HTTP_TIMEOUT_SECONDS: float = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "10"))

# Language translations are delivered in (and dictionary parts of speech)
PRIMARY_LANGUAGE: str = os.environ.get("PRIMARY_LANGUAGE", "en")

# Bounded wait for latency-sensitive callers
TRANSLATION_TIMEOUT_MS: int = int(os.environ.get("TRANSLATION_TIMEOUT_MS", "3000"))
POLL_INTERVAL_MS: int = int(os.environ.get("POLL_INTERVAL_MS", "100"))

# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class Settings:
    """Translator settings, passed explicitly to providers and tasks."""

    provider: str = TRANSLATION_PROVIDER
    google_host: str = GOOGLE_HOST
    google_tkk: str = GOOGLE_TKK
    http_timeout_seconds: float = HTTP_TIMEOUT_SECONDS
    primary_language: Lang = Lang.ENGLISH
    translation_timeout_ms: int = TRANSLATION_TIMEOUT_MS
    poll_interval_ms: int = POLL_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.primary_language is Lang.AUTO:
            raise ValueError("primary_language cannot be AUTO")
        if self.poll_interval_ms <= 0:
            raise ValueError("poll_interval_ms must be positive")


def load_settings() -> Settings:
    """Build Settings from the environment-derived constants."""
    return Settings(primary_language=Lang.value_of_code(PRIMARY_LANGUAGE))
