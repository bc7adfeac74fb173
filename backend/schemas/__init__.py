"""Pydantic schemas for the wedding plan document and the local bridge API."""

from .plan import (
    CeremonyDetails,
    Guest,
    MediaCategory,
    MediaDimensions,
    MediaItem,
    MediaType,
    PlusOne,
    ReceptionDetails,
    RSVPStatus,
    SeatAssignment,
    Table,
    TableShape,
    TodoItem,
    WeddingContactInfo,
    WeddingPlan,
    WishlistItem,
    WishlistStatus,
)
from .responses import Dimensions, MediaFileInfoResponse, MediaSaved

__all__ = [
    "CeremonyDetails",
    "Dimensions",
    "Guest",
    "MediaCategory",
    "MediaDimensions",
    "MediaFileInfoResponse",
    "MediaItem",
    "MediaSaved",
    "MediaType",
    "PlusOne",
    "ReceptionDetails",
    "RSVPStatus",
    "SeatAssignment",
    "Table",
    "TableShape",
    "TodoItem",
    "WeddingContactInfo",
    "WeddingPlan",
    "WishlistItem",
    "WishlistStatus",
]
