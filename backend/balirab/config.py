"""Runtime settings loaded from environment variables.

The API module loads ``.env`` files with python-dotenv before settings are
read, so values there behave like regular environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings.

    ``api_key`` is the process-wide fallback credential; a key supplied by
    the user for a single request always takes precedence.
    """

    api_key: str | None = field(
        default_factory=lambda: os.getenv("ANTHROPIC_API_KEY") or None,
        repr=False,
    )
    model: str = field(default_factory=lambda: os.getenv("BALIRAB_MODEL", DEFAULT_MODEL))
    # Low temperature biases toward precise numbers over creative variation.
    temperature: float = field(
        default_factory=lambda: float(os.getenv("BALIRAB_TEMPERATURE", "0.2"))
    )
    max_tokens: int = field(
        default_factory=lambda: int(os.getenv("BALIRAB_MAX_TOKENS", "16000"))
    )
    cors_origins: tuple[str, ...] = field(
        default_factory=lambda: _split_csv(
            os.getenv("BALIRAB_CORS_ORIGINS", "http://localhost:3000")
        )
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
