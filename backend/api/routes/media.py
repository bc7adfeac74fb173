"""
Media files: upload, download, delete, info.
Large uploads are written off the event loop; callers save the plan referencing
the returned handle only after the upload has returned.
"""

import logging
import mimetypes
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from api.deps import get_media_store
from api.helpers import http_error
from config import get_settings
from repositories import MediaStoreProtocol, StoreError
from schemas.responses import Dimensions, MediaFileInfoResponse, MediaSaved

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/media", tags=["media"])


@router.post("", response_model=MediaSaved)
async def save_media_file(
    media_store: Annotated[MediaStoreProtocol, Depends(get_media_store)],
    file: UploadFile = File(..., description="Photo or video bytes"),
    file_name: Optional[str] = Form(None, description="Stored name; defaults to the upload's filename"),
):
    name = (file_name or file.filename or "").strip()
    if not name:
        raise HTTPException(400, detail={"code": "invalid_media_name", "message": "No file name given."})

    content = await file.read()
    limit = get_settings().MAX_MEDIA_BYTES
    if len(content) > limit:
        logger.warning("Rejected upload %s: %.1f MB over limit", name, len(content) / (1024 * 1024))
        raise HTTPException(
            413,
            detail={
                "code": "media_too_large",
                "message": f"File too large. Maximum {limit // (1024 * 1024)} MB.",
            },
        )

    try:
        path = await run_in_threadpool(media_store.put, name, content)
    except StoreError as e:
        raise http_error(e) from e
    return MediaSaved(path=path)


@router.get("/{filename}/info", response_model=MediaFileInfoResponse)
async def get_media_file_info(
    filename: str,
    media_store: Annotated[MediaStoreProtocol, Depends(get_media_store)],
):
    try:
        info = await run_in_threadpool(media_store.info, filename)
    except StoreError as e:
        raise http_error(e) from e
    dims = None
    if info.dimensions:
        dims = Dimensions(width=info.dimensions[0], height=info.dimensions[1])
    return MediaFileInfoResponse(size=info.size, dimensions=dims)


@router.get("/{filename}")
async def get_media_file_data(
    filename: str,
    media_store: Annotated[MediaStoreProtocol, Depends(get_media_store)],
):
    try:
        data = await run_in_threadpool(media_store.get, filename)
    except StoreError as e:
        raise http_error(e) from e
    media_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return Response(content=data, media_type=media_type)


@router.delete("/{filename}")
async def delete_media_file(
    filename: str,
    media_store: Annotated[MediaStoreProtocol, Depends(get_media_store)],
):
    """Remove a media file. Succeeds when the file is already gone."""
    try:
        await run_in_threadpool(media_store.delete, filename)
    except StoreError as e:
        raise http_error(e) from e
    return {"status": "deleted"}
