from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel, StringConstraints

from src.errors import RegistryError
from src.events import get_event
from src.guests.dependencies import get_rsvp_ledger
from src.guests.ledger import RSVPLedger
from src.guests.urls import CONFIRM_RSVP_URL
from src.responses import ERROR_RESPONSES, ApiResponse, error_response

router = APIRouter()


class ConfirmRSVPRequest(BaseModel):
    full_name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=100)]
    phone: Annotated[str, StringConstraints(strip_whitespace=True, min_length=10, max_length=20)]
    message: Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)] | None = None


class ConfirmedRSVP(BaseModel):
    uuid: UUID
    name: str
    message: str | None = None
    confirmed_at: datetime


@router.post(CONFIRM_RSVP_URL, response_model=ApiResponse, responses=ERROR_RESPONSES)
async def confirm_rsvp(
    request: ConfirmRSVPRequest,
    event: str = Depends(get_event),
    ledger: RSVPLedger = Depends(get_rsvp_ledger),
):
    """
    Confirm attendance at an event.

    Guests are identified by phone number; a guest can confirm once per event.
    """
    try:
        rsvp = await ledger.confirm(
            full_name=request.full_name,
            phone=request.phone,
            event=event,
            message=request.message or None,
        )
    except RegistryError as e:
        return error_response(e)

    confirmed = ConfirmedRSVP(
        uuid=rsvp.uuid,
        name=rsvp.guest_name,
        message=rsvp.message,
        confirmed_at=rsvp.confirmed_at,
    )
    return ApiResponse(
        success=True,
        message="Thank you for confirming your attendance!",
        data=confirmed.model_dump(mode="json"),
    )
