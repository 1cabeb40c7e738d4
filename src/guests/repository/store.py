"""Guest and RSVP storage. Stores return DTOs, never ORM models."""

from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import (
    RSVPDTO,
    DuplicateRSVPError,
    GuestAlreadyExistsError,
    GuestDTO,
    NewRSVPDTO,
)
from src.guests.repository.orm_models import (
    GUEST_PHONE_INDEX,
    RSVP,
    RSVP_GUEST_EVENT_CONSTRAINT,
    Guest,
)


def is_unique_violation(error: IntegrityError, constraint: str, columns: list[str]) -> bool:
    """Whether an integrity error comes from the given unique constraint.

    PostgreSQL reports the constraint by name; SQLite only lists its columns.
    """
    message = str(error.orig)
    return constraint in message or f"UNIQUE constraint failed: {', '.join(columns)}" in message


class GuestStore(ABC):
    @abstractmethod
    async def find_guest_by_phone(self, phone: str) -> GuestDTO | None:
        raise NotImplementedError

    @abstractmethod
    async def save_guest(self, full_name: str, phone: str) -> GuestDTO:
        """Store a new guest.

        Raises:
            GuestAlreadyExistsError: a guest with this phone already exists
        """
        raise NotImplementedError

    @abstractmethod
    async def rsvp_exists(self, guest_id: UUID, event: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def save_rsvp(self, rsvp: NewRSVPDTO) -> RSVPDTO:
        """Store a new RSVP.

        Raises:
            DuplicateRSVPError: an RSVP for this guest and event already exists
        """
        raise NotImplementedError

    @abstractmethod
    async def list_rsvps_by_event(self, event: str) -> list[RSVPDTO]:
        """All RSVPs of an event with guest names, oldest first."""
        raise NotImplementedError


class SqlGuestStore(GuestStore):
    """SQL implementation of the guest store.

    Uniqueness of guest phones and of (guest, event) RSVPs is enforced by the
    database; a violation is reported as the matching domain error.
    """

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def find_guest_by_phone(self, phone: str) -> GuestDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Guest).where(Guest.phone == phone))
            guest = result.scalar_one_or_none()
            return GuestDTO.from_guest(guest) if guest else None

    async def save_guest(self, full_name: str, phone: str) -> GuestDTO:
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                guest = Guest(full_name=full_name, phone=phone)
                session.add(guest)
                await session.flush()
                return GuestDTO.from_guest(guest)
        except IntegrityError as e:
            if not is_unique_violation(e, GUEST_PHONE_INDEX, ["guests.phone"]):
                raise
            raise GuestAlreadyExistsError(phone) from e

    async def rsvp_exists(self, guest_id: UUID, event: str) -> bool:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(exists().where(RSVP.guest_id == guest_id, RSVP.event == event))
            )
            return bool(result.scalar())

    async def save_rsvp(self, rsvp: NewRSVPDTO) -> RSVPDTO:
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                orm_rsvp = RSVP(
                    guest_id=rsvp.guest.uuid,
                    event=rsvp.event,
                    attending=rsvp.attending,
                    guest_count=rsvp.guest_count,
                    message=rsvp.message,
                    confirmed_at=rsvp.confirmed_at,
                )
                session.add(orm_rsvp)
                await session.flush()
                return RSVPDTO.from_rsvp(orm_rsvp, guest_name=rsvp.guest.full_name)
        except IntegrityError as e:
            if not is_unique_violation(
                e, RSVP_GUEST_EVENT_CONSTRAINT, ["rsvps.guest_id", "rsvps.event"]
            ):
                raise
            raise DuplicateRSVPError(rsvp.guest.uuid, rsvp.event) from e

    async def list_rsvps_by_event(self, event: str) -> list[RSVPDTO]:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(RSVP, Guest.full_name)
                .join(Guest, RSVP.guest_id == Guest.uuid)
                .where(RSVP.event == event)
                .order_by(RSVP.confirmed_at)
            )
            return [
                RSVPDTO.from_rsvp(rsvp, guest_name=guest_name)
                for rsvp, guest_name in result.all()
            ]
