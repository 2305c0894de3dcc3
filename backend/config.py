"""
Wall backend configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Wall API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]
    LOG_LEVEL: str = "INFO"

    # Storage: "file" | "memory" (memory is lost on exit)
    WALL_STORAGE: Literal["file", "memory"] = "file"
    WALL_DATA_DIR: Path

    def __init__(self):
        self.APP_TITLE = (os.environ.get("APP_TITLE") or "Wall API").strip()
        self.APP_VERSION = (os.environ.get("APP_VERSION") or "1.0.0").strip()
        origins = os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        self.LOG_LEVEL = (os.environ.get("WALL_LOG_LEVEL") or "INFO").strip().upper()
        self.WALL_STORAGE = os.environ.get("WALL_STORAGE", "file").lower()
        if self.WALL_STORAGE not in ("file", "memory"):
            self.WALL_STORAGE = "file"
        data_dir = os.environ.get("WALL_DATA_DIR", "data")
        self.WALL_DATA_DIR = Path(data_dir)
