from fastapi import APIRouter

from devevents.api.dev_events import router as dev_events_router

router = APIRouter()
router.include_router(dev_events_router)
