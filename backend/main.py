"""
Wedding Planner local API
Bridges the desktop UI to the plan document and media store on disk.
Run: uvicorn main:app --port 8787
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import store
from api.routes import health_router, media_router, plan_router
from config import get_settings

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store.configure(settings.WEDDING_DATA_DIR)
    logger.info("Wedding Planner API started (data dir: %s)", settings.WEDDING_DATA_DIR)
    yield
    logger.info("Wedding Planner API shut down")


app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(plan_router)
app.include_router(media_router)
