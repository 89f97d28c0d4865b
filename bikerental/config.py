"""
Application settings.

Values come from ``BIKERENTAL_*`` environment variables with defaults for
every field. ``BIKERENTAL_DATA_PATH=""`` keeps the store in memory only.
"""

import os
from dataclasses import dataclass
from typing import Optional

from bikerental.models.store import DEFAULT_DATA_PATH
from bikerental.utils.constants import TRUE_VALUES


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    data_path: Optional[str] = str(DEFAULT_DATA_PATH)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    secret_key: str = "dev-secret-change-me"
    debug: bool = False

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            data_path=env.get("BIKERENTAL_DATA_PATH", str(DEFAULT_DATA_PATH)) or None,
            log_level=env.get("BIKERENTAL_LOG_LEVEL", "INFO"),
            log_file=env.get("BIKERENTAL_LOG_FILE") or None,
            secret_key=env.get("BIKERENTAL_SECRET_KEY", "dev-secret-change-me"),
            debug=env.get("BIKERENTAL_DEBUG", "false").lower() in TRUE_VALUES,
        )
