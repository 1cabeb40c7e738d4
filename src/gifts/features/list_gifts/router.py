from datetime import datetime
from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.events import get_event
from src.gifts.dependencies import get_gift_registry
from src.gifts.dtos import GiftDTO, GiftStatus
from src.gifts.registry import GiftRegistry
from src.gifts.urls import GIFTS_BY_EVENT_URL
from src.guests.phone import mask_phone_for_display

router = APIRouter()


class GiftResponse(BaseModel):
    """Public view of a gift. Reservation codes and full phone numbers are never exposed."""

    uuid: UUID
    name: str
    description: str | None = None
    image_url: str | None = None
    external_link: str | None = None
    position: int
    price: Decimal | None = None
    event: str
    status: GiftStatus
    reserved_by: str | None = None
    reserved_phone_display: str | None = None
    reserved_at: datetime | None = None
    purchased_at: datetime | None = None

    @classmethod
    def from_dto(cls, gift: GiftDTO) -> "GiftResponse":
        return cls(
            uuid=gift.uuid,
            name=gift.name,
            description=gift.description,
            image_url=gift.image_url,
            external_link=gift.external_link,
            position=gift.position,
            price=gift.price,
            event=gift.event,
            status=gift.status,
            reserved_by=gift.reserved_by,
            reserved_phone_display=mask_phone_for_display(gift.reserved_by_phone),
            reserved_at=gift.reserved_at,
            purchased_at=gift.purchased_at,
        )


@router.get(GIFTS_BY_EVENT_URL, response_model=list[GiftResponse])
async def list_gifts(
    event: str = Depends(get_event),
    registry: GiftRegistry = Depends(get_gift_registry),
) -> list[GiftResponse]:
    """
    List every gift of an event's registry, whatever its status.
    """
    gifts = await registry.list_by_event(event)
    return [GiftResponse.from_dto(gift) for gift in gifts]
