"""Response body models for the local bridge API."""

from typing import Optional

from pydantic import BaseModel


class MediaSaved(BaseModel):
    path: str


class Dimensions(BaseModel):
    width: int
    height: int


class MediaFileInfoResponse(BaseModel):
    size: int
    dimensions: Optional[Dimensions] = None
