from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from src.errors import ConflictError

if TYPE_CHECKING:
    from src.guests.repository.orm_models import RSVP, Guest

ALREADY_CONFIRMED = "You have already confirmed attendance for this event."


class GuestAlreadyExistsError(Exception):
    """Raised when a guest with the same phone was stored first."""

    def __init__(self, phone: str) -> None:
        self.phone = phone
        super().__init__("A guest with this phone number already exists")


class DuplicateRSVPError(ConflictError):
    """Raised when an RSVP for the same guest and event was stored first."""

    def __init__(self, guest_id: UUID, event: str) -> None:
        self.guest_id = guest_id
        self.event = event
        super().__init__(ALREADY_CONFIRMED)


@dataclass(frozen=True)
class GuestDTO:
    """DTO for guest data."""

    uuid: UUID
    full_name: str
    phone: str

    @classmethod
    def from_guest(cls, guest: "Guest") -> "GuestDTO":
        """Create GuestDTO from Guest ORM model."""
        return cls(uuid=guest.uuid, full_name=guest.full_name, phone=guest.phone)


@dataclass(frozen=True)
class NewRSVPDTO:
    """DTO for an RSVP about to be recorded."""

    guest: GuestDTO
    event: str
    confirmed_at: datetime
    message: str | None = None
    attending: bool = True
    guest_count: int = 1


@dataclass(frozen=True)
class RSVPDTO:
    """DTO for a recorded RSVP, joined with the guest's name for display."""

    uuid: UUID
    guest_id: UUID
    guest_name: str
    event: str
    attending: bool
    guest_count: int
    confirmed_at: datetime
    message: str | None = None

    @classmethod
    def from_rsvp(cls, rsvp: "RSVP", guest_name: str) -> "RSVPDTO":
        """Create RSVPDTO from RSVP ORM model."""
        return cls(
            uuid=rsvp.uuid,
            guest_id=rsvp.guest_id,
            guest_name=guest_name,
            event=rsvp.event,
            attending=rsvp.attending,
            guest_count=rsvp.guest_count,
            confirmed_at=rsvp.confirmed_at,
            message=rsvp.message,
        )
