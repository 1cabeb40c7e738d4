import logging

from src.guests.dtos import GuestAlreadyExistsError, GuestDTO
from src.guests.phone import normalize_phone
from src.guests.repository.store import GuestStore

logger = logging.getLogger(__name__)


class GuestDirectory:
    """Resolves a phone number to a single guest identity."""

    def __init__(self, store: GuestStore) -> None:
        self._store = store

    async def resolve_or_create(self, full_name: str, phone: str) -> GuestDTO:
        """Get the guest for this phone, creating one with full_name if none exists.

        Concurrent calls for the same unseen phone race on the store's unique
        constraint; the losers re-read the winner's record.
        """
        key = normalize_phone(phone)
        guest = await self._store.find_guest_by_phone(key)
        if guest is not None:
            return guest

        try:
            guest = await self._store.save_guest(full_name=full_name, phone=key)
        except GuestAlreadyExistsError:
            guest = await self._store.find_guest_by_phone(key)
            if guest is None:
                raise
            logger.debug("Guest %s was created concurrently, reusing it", guest.uuid)
            return guest

        logger.info("Created guest %s", guest.uuid)
        return guest
