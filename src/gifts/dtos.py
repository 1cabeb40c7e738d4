from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.gifts.repository.orm_models import Gift


class GiftStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    PURCHASED = "purchased"


@dataclass(frozen=True)
class GiftDTO:
    """DTO for a registry gift, including its reservation metadata."""

    uuid: UUID
    name: str
    event: str
    status: GiftStatus = GiftStatus.AVAILABLE
    description: str | None = None
    image_url: str | None = None
    external_link: str | None = None
    position: int = 0
    price: Decimal | None = None
    # Reservation metadata, present only while reserved (kept once purchased)
    reserved_by: str | None = None
    reserved_by_phone: str | None = None
    reservation_code: str | None = None
    reserved_at: datetime | None = None
    purchased_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def from_gift(cls, gift: "Gift") -> "GiftDTO":
        """Create GiftDTO from Gift ORM model."""
        return cls(
            uuid=gift.uuid,
            name=gift.name,
            event=gift.event,
            status=GiftStatus(gift.status),
            description=gift.description,
            image_url=gift.image_url,
            external_link=gift.external_link,
            position=gift.position,
            price=gift.price,
            reserved_by=gift.reserved_by,
            reserved_by_phone=gift.reserved_by_phone,
            reservation_code=gift.reservation_code,
            reserved_at=gift.reserved_at,
            purchased_at=gift.purchased_at,
            created_at=gift.created_at,
        )


@dataclass(frozen=True)
class NewGiftDTO:
    """DTO for a catalog entry to be added to the registry."""

    name: str
    event: str
    price: Decimal | None = None
    description: str | None = None
    image_url: str | None = None
    external_link: str | None = None
    position: int = 0

    def __post_init__(self) -> None:
        if self.price is not None and self.price < 0:
            raise ValueError(f"Gift '{self.name}' has a negative price")
