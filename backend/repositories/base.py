"""Interfaces the rest of the app depends on instead of a concrete store."""

from dataclasses import dataclass
from typing import Optional, Protocol

from schemas.plan import WeddingPlan


@dataclass(frozen=True)
class MediaFileInfo:
    """Size in bytes and (width, height) when the file is a readable image."""
    size: int
    dimensions: Optional[tuple[int, int]] = None


class PlanStoreProtocol(Protocol):
    def save(self, plan: WeddingPlan) -> None: ...

    def load(self) -> WeddingPlan: ...

    def exists(self) -> bool: ...


class MediaStoreProtocol(Protocol):
    def put(self, name: str, data: bytes) -> str: ...

    def get(self, name: str) -> bytes: ...

    def delete(self, name: str) -> None: ...

    def info(self, name: str) -> MediaFileInfo: ...
