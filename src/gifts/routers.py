from fastapi import APIRouter

from .features.cancel_reservation.router import router as cancel_reservation_router
from .features.list_gifts.router import router as list_gifts_router
from .features.mark_purchased.router import router as mark_purchased_router
from .features.reserve_gift.router import router as reserve_gift_router

router = APIRouter()

# Static POST paths are registered before the {event} listing.
router.include_router(reserve_gift_router)
router.include_router(mark_purchased_router)
router.include_router(cancel_reservation_router)
router.include_router(list_gifts_router)
