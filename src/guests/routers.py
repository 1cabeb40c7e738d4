from fastapi import APIRouter

from .features.confirm_rsvp.router import router as confirm_rsvp_router
from .features.list_rsvps.router import router as list_rsvps_router

router = APIRouter()

router.include_router(confirm_rsvp_router)
router.include_router(list_rsvps_router)
