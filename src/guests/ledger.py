import logging
from datetime import UTC, datetime

from src.errors import ConflictError
from src.guests.directory import GuestDirectory
from src.guests.dtos import ALREADY_CONFIRMED, RSVPDTO, DuplicateRSVPError, NewRSVPDTO
from src.guests.repository.store import GuestStore

logger = logging.getLogger(__name__)


class RSVPLedger:
    """Records at most one attendance confirmation per guest and event."""

    def __init__(self, store: GuestStore, directory: GuestDirectory | None = None) -> None:
        self._store = store
        self._directory = directory or GuestDirectory(store)

    async def confirm(
        self,
        full_name: str,
        phone: str,
        event: str,
        message: str | None = None,
    ) -> RSVPDTO:
        """Confirm attendance of the guest identified by phone.

        Raises:
            ConflictError: the guest already confirmed for this event
        """
        guest = await self._directory.resolve_or_create(full_name=full_name, phone=phone)

        if await self._store.rsvp_exists(guest.uuid, event):
            logger.warning("Guest %s already confirmed for %s", guest.uuid, event)
            raise ConflictError(ALREADY_CONFIRMED)

        try:
            rsvp = await self._store.save_rsvp(
                NewRSVPDTO(
                    guest=guest,
                    event=event,
                    message=message,
                    confirmed_at=datetime.now(UTC),
                )
            )
        except DuplicateRSVPError:
            logger.warning("Guest %s confirmed concurrently for %s", guest.uuid, event)
            raise

        logger.info("Guest %s confirmed attendance for %s", guest.uuid, event)
        return rsvp

    async def list_by_event(self, event: str) -> list[RSVPDTO]:
        return await self._store.list_rsvps_by_event(event)
