from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.events import get_event
from src.guests.dependencies import get_rsvp_ledger
from src.guests.ledger import RSVPLedger
from src.guests.urls import LIST_RSVPS_URL

router = APIRouter()


class RSVPResponse(BaseModel):
    uuid: UUID
    name: str
    attending: bool
    guest_count: int
    message: str | None = None
    confirmed_at: datetime


@router.get(LIST_RSVPS_URL, response_model=list[RSVPResponse])
async def list_rsvps(
    event: str = Depends(get_event),
    ledger: RSVPLedger = Depends(get_rsvp_ledger),
) -> list[RSVPResponse]:
    """
    List the attendance confirmations of an event.
    """
    rsvps = await ledger.list_by_event(event)
    return [
        RSVPResponse(
            uuid=rsvp.uuid,
            name=rsvp.guest_name,
            attending=rsvp.attending,
            guest_count=rsvp.guest_count,
            message=rsvp.message,
            confirmed_at=rsvp.confirmed_at,
        )
        for rsvp in rsvps
    ]
