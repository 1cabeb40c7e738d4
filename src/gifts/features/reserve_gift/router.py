from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel, StringConstraints

from src.errors import RegistryError
from src.events import EventName
from src.gifts.dependencies import get_gift_registry
from src.gifts.registry import GiftRegistry
from src.gifts.urls import RESERVE_GIFT_URL
from src.responses import ERROR_RESPONSES, ApiResponse, error_response

router = APIRouter()


class ReserveGiftRequest(BaseModel):
    gift_id: UUID
    event: EventName
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=100)]
    phone: Annotated[str, StringConstraints(strip_whitespace=True, min_length=10, max_length=20)]


@router.post(RESERVE_GIFT_URL, response_model=ApiResponse, responses=ERROR_RESPONSES)
async def reserve_gift(
    request: ReserveGiftRequest,
    registry: GiftRegistry = Depends(get_gift_registry),
):
    """
    Reserve an available gift.

    The returned reservation code is the only credential for marking the gift
    as purchased or cancelling the reservation later.
    """
    try:
        code = await registry.reserve(
            gift_id=request.gift_id,
            event=request.event,
            name=request.name,
            phone=request.phone,
        )
    except RegistryError as e:
        return error_response(e)

    return ApiResponse(
        success=True,
        message="Gift reserved successfully!",
        data={"reservationCode": code},
    )
