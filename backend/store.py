"""
Wedding Planner persistence commands.

The six operations the UI shell calls, bound to the stores for the configured
app-data root:

  data/
    wedding_plan.json   — the WeddingPlan document
    media/<name>        — uploaded photos and videos

Failures raise repositories.errors.StoreError subclasses carrying a message and
a code; a missing plan file and deleting an absent media file are not failures.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from config import get_settings
from repositories import MediaFileStore, PlanFileStore, PlanFormatError
from schemas.plan import WeddingPlan

logger = logging.getLogger(__name__)

_plan_store: Optional[PlanFileStore] = None
_media_store: Optional[MediaFileStore] = None


def configure(data_dir: Path, plan_file: Optional[str] = None, media_dir: Optional[str] = None) -> None:
    """Point the commands at `data_dir`. Called once at startup, and by tests."""
    global _plan_store, _media_store
    settings = get_settings()
    _plan_store = PlanFileStore(data_dir, plan_file or settings.WEDDING_PLAN_FILE)
    _media_store = MediaFileStore(data_dir, media_dir or settings.WEDDING_MEDIA_DIR)
    logger.info("Using app-data root %s", Path(data_dir).resolve())


def plan_store() -> PlanFileStore:
    if _plan_store is None:
        configure(get_settings().WEDDING_DATA_DIR)
    return _plan_store


def media_store() -> MediaFileStore:
    if _media_store is None:
        configure(get_settings().WEDDING_DATA_DIR)
    return _media_store


# ── Plan ───────────────────────────────────────────────────────────────

def save_plan(plan: Union[WeddingPlan, dict]) -> None:
    """Replace the stored plan. Accepts a WeddingPlan or its wire-format dict."""
    if not isinstance(plan, WeddingPlan):
        try:
            plan = WeddingPlan.model_validate(plan)
        except ValidationError as e:
            raise PlanFormatError(f"Plan does not match the current schema: {e}") from e
    plan_store().save(plan)


def load_plan() -> WeddingPlan:
    return plan_store().load()


# ── Media ──────────────────────────────────────────────────────────────

def save_media_file(file_name: str, file_data: bytes) -> str:
    """Store bytes under `file_name`; returns the handle, e.g. 'media/photo1.png'."""
    return media_store().put(file_name, file_data)


def get_media_file_data(filename: str) -> bytes:
    return media_store().get(filename)


def delete_media_file(filename: str) -> None:
    media_store().delete(filename)


def get_media_file_info(filename: str) -> tuple[int, Optional[tuple[int, int]]]:
    """(size in bytes, (width, height) or None when dimensions are unknown)."""
    info = media_store().info(filename)
    return info.size, info.dimensions
