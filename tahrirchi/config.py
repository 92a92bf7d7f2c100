"""Runtime configuration loaded from the environment and an optional .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

API_KEY_ENV = "GEMINI_API_KEY"
LEGACY_API_KEY_ENV = "API_KEY"
MODEL_ENV = "TAHRIRCHI_MODEL"
TEMPERATURE_ENV = "TAHRIRCHI_TEMPERATURE"

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.2


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE

    def __repr__(self) -> str:
        # Keep the credential out of logs and tracebacks.
        key = "***" if self.api_key else None
        return (
            f"Settings(api_key={key!r}, model={self.model!r}, "
            f"temperature={self.temperature!r})"
        )


def load_settings(dotenv_path: str | Path | None = None) -> Settings:
    """Build :class:`Settings` from a .env file and the process environment.

    Existing environment variables take precedence over values in the .env
    file. A missing API key is not an error here; the analyzer reports it as a
    ``ConfigurationError`` before making any request.
    """
    if dotenv_path is not None:
        load_dotenv(dotenv_path=Path(dotenv_path))
    else:
        load_dotenv()

    api_key = (
        os.environ.get(API_KEY_ENV) or os.environ.get(LEGACY_API_KEY_ENV) or ""
    ).strip()
    model = os.environ.get(MODEL_ENV, "").strip() or DEFAULT_MODEL

    try:
        temperature = float(os.environ.get(TEMPERATURE_ENV, DEFAULT_TEMPERATURE))
    except ValueError:
        temperature = DEFAULT_TEMPERATURE
    temperature = max(0.0, temperature)

    return Settings(api_key=api_key or None, model=model, temperature=temperature)
