"""FastAPI dependencies returning the stores. Tests override these."""

import store
from repositories import MediaStoreProtocol, PlanStoreProtocol


def get_plan_store() -> PlanStoreProtocol:
    """Return the plan store for the configured app-data root. Use in Depends()."""
    return store.plan_store()


def get_media_store() -> MediaStoreProtocol:
    """Return the media store for the configured app-data root. Use in Depends()."""
    return store.media_store()
