from fastapi import APIRouter, Depends

from src.errors import RegistryError
from src.gifts.dependencies import get_gift_registry
from src.gifts.registry import GiftRegistry
from src.gifts.schemas import GiftActionRequest
from src.gifts.urls import MARK_PURCHASED_URL
from src.responses import CREDENTIAL_ERROR_RESPONSES, ApiResponse, error_response

router = APIRouter()


@router.post(MARK_PURCHASED_URL, response_model=ApiResponse, responses=CREDENTIAL_ERROR_RESPONSES)
async def mark_purchased(
    request: GiftActionRequest,
    registry: GiftRegistry = Depends(get_gift_registry),
):
    """
    Mark a reserved gift as purchased, authorized by its reservation code.
    """
    try:
        await registry.mark_purchased(
            gift_id=request.gift_id,
            event=request.event,
            code=request.code,
        )
    except RegistryError as e:
        return error_response(e)

    return ApiResponse(success=True, message="Gift marked as purchased!")
