"""Persistence layer: abstract interface and implementations."""

from .base import MediaFileInfo, MediaStoreProtocol, PlanStoreProtocol
from .errors import (
    InvalidMediaName,
    MediaNotFoundError,
    PlanFormatError,
    StorageIOError,
    StoreError,
)
from .file_store import PlanFileStore
from .media_store import MediaFileStore

__all__ = [
    "InvalidMediaName",
    "MediaFileInfo",
    "MediaFileStore",
    "MediaNotFoundError",
    "MediaStoreProtocol",
    "PlanFileStore",
    "PlanFormatError",
    "PlanStoreProtocol",
    "StorageIOError",
    "StoreError",
]
