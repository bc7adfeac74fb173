"""Liveness check for the UI shell, with whether a plan has been saved yet."""

from typing import Annotated

from fastapi import APIRouter, Depends

from api.deps import get_plan_store
from config import get_settings
from repositories import PlanStoreProtocol

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(plan_store: Annotated[PlanStoreProtocol, Depends(get_plan_store)]):
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.APP_TITLE,
        "version": settings.APP_VERSION,
        "plan_saved": plan_store.exists(),
    }
