"""Load and save the wedding plan document."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from api.deps import get_plan_store
from api.helpers import http_error
from repositories import PlanStoreProtocol, StoreError
from schemas.plan import WeddingPlan

router = APIRouter(prefix="/api/plan", tags=["plan"])


@router.get("")
async def load_plan(plan_store: Annotated[PlanStoreProtocol, Depends(get_plan_store)]):
    """Current plan, or the all-defaults plan if nothing was saved yet."""
    try:
        plan = await run_in_threadpool(plan_store.load)
    except StoreError as e:
        raise http_error(e) from e
    return JSONResponse(plan.to_document())


@router.put("")
async def save_plan(
    plan: WeddingPlan,
    plan_store: Annotated[PlanStoreProtocol, Depends(get_plan_store)],
):
    """Replace the whole plan. There is no partial update."""
    try:
        await run_in_threadpool(plan_store.save, plan)
    except StoreError as e:
        raise http_error(e) from e
    return {"status": "saved"}
