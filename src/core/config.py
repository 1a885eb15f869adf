"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  them into the CLI.
- Lets adapters (HTTP, file output) read configuration consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "etax-reprint"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "etax-reprint"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "etax-reprint"
    return Path.home() / ".config" / "etax-reprint"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    The UTC+7 offset used for date boundaries is intentionally absent: the
    remote service interprets dates in that offset wherever the tool runs.
    """

    model_config = SettingsConfigDict(
        env_prefix="ETAX_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://etax.exat.co.th/backend/api",
        min_length=8,
        description="Base URL of the e-Tax backend API.",
    )
    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="etax-reprint/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    output_dir: Path = Field(
        default=Path("."),
        description="Directory for generated ZIP filenames.",
    )
