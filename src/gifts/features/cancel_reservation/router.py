from fastapi import APIRouter, Depends

from src.errors import RegistryError
from src.gifts.dependencies import get_gift_registry
from src.gifts.registry import GiftRegistry
from src.gifts.schemas import GiftActionRequest
from src.gifts.urls import CANCEL_RESERVATION_URL
from src.responses import CREDENTIAL_ERROR_RESPONSES, ApiResponse, error_response

router = APIRouter()


@router.post(
    CANCEL_RESERVATION_URL, response_model=ApiResponse, responses=CREDENTIAL_ERROR_RESPONSES
)
async def cancel_reservation(
    request: GiftActionRequest,
    registry: GiftRegistry = Depends(get_gift_registry),
):
    """
    Cancel a reservation, making the gift available again.
    """
    try:
        await registry.cancel_reservation(
            gift_id=request.gift_id,
            event=request.event,
            code=request.code,
        )
    except RegistryError as e:
        return error_response(e)

    return ApiResponse(success=True, message="Reservation cancelled successfully!")
