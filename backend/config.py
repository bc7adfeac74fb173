"""
Wedding Planner backend configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Wedding Planner Local API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]
    LOG_LEVEL: str = "INFO"

    # Storage: app-data root holding the plan document and the media/ subdirectory
    WEDDING_DATA_DIR: Path
    WEDDING_PLAN_FILE: str = "wedding_plan.json"
    WEDDING_MEDIA_DIR: str = "media"

    # Upload limit for the local bridge only (stores impose none)
    MAX_MEDIA_BYTES: int = 200 * 1024 * 1024

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "http://localhost:1420,tauri://localhost")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
        data_dir = os.environ.get("WEDDING_DATA_DIR", "data")
        self.WEDDING_DATA_DIR = Path(data_dir).expanduser()
        self.WEDDING_PLAN_FILE = (os.environ.get("WEDDING_PLAN_FILE") or "wedding_plan.json").strip()
        self.WEDDING_MEDIA_DIR = (os.environ.get("WEDDING_MEDIA_DIR") or "media").strip()
        try:
            self.MAX_MEDIA_BYTES = int(os.environ.get("MAX_MEDIA_BYTES", 200 * 1024 * 1024))
        except ValueError:
            self.MAX_MEDIA_BYTES = 200 * 1024 * 1024

    @property
    def plan_path(self) -> Path:
        """Full path of the wedding plan document."""
        return self.WEDDING_DATA_DIR / self.WEDDING_PLAN_FILE

    @property
    def media_dir(self) -> Path:
        """Directory holding uploaded photos and videos."""
        return self.WEDDING_DATA_DIR / self.WEDDING_MEDIA_DIR
