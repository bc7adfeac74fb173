"""Shared helpers for API routes (store error → HTTP error)."""

import logging

from fastapi import HTTPException

from repositories.errors import StoreError

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    "media_not_found": 404,
    "invalid_media_name": 400,
    "plan_format_error": 422,
    "plan_serialization_error": 422,
    "storage_io_error": 500,
}


def http_error(e: StoreError) -> HTTPException:
    """Build the HTTPException for a store failure, with code and message detail."""
    status = _STATUS_BY_CODE.get(e.code, 500)
    if status >= 500:
        logger.error("Store failure (%s): %s", e.code, e.message)
    return HTTPException(status, detail={"code": e.code, "message": e.message})
