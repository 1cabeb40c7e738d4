"""Gift registry: the reservation state machine.

    available --reserve--> reserved --mark_purchased--> purchased
                           reserved --cancel_reservation--> available

Every transition goes through GiftStore.transition_gift, which only applies
the change if the gift is still in the state the check above it observed.
"""

import logging
import secrets
from collections.abc import Callable
from datetime import UTC, datetime
from uuid import UUID

from src.errors import ConflictError, InvalidCredentialError, NotFoundError
from src.gifts.dtos import GiftDTO, GiftStatus
from src.gifts.repository.store import GiftStore
from src.gifts.reservation_code import generate_reservation_code

logger = logging.getLogger(__name__)

GIFT_NOT_FOUND = "Gift not found."
GIFT_NOT_AVAILABLE = "This gift is not available for reservation."
GIFT_NOT_RESERVED = "This gift is not reserved."
INVALID_RESERVATION_CODE = "Invalid reservation code."


class GiftRegistry:
    def __init__(
        self,
        store: GiftStore,
        code_generator: Callable[[], str] = generate_reservation_code,
    ) -> None:
        self._store = store
        self._generate_code = code_generator

    async def list_by_event(self, event: str) -> list[GiftDTO]:
        return await self._store.list_gifts_by_event(event)

    async def reserve(self, gift_id: UUID, event: str, name: str, phone: str) -> str:
        """Reserve an available gift and return the reservation code.

        The code is the only credential for later purchase or cancellation.
        """
        gift = await self._get_gift(gift_id, event)
        if gift.status != GiftStatus.AVAILABLE:
            logger.warning("Reservation rejected for gift %s: status is %s", gift_id, gift.status.value)
            raise ConflictError(GIFT_NOT_AVAILABLE)

        code = self._generate_code()
        try:
            await self._store.transition_gift(
                gift_id,
                event,
                expected_status=GiftStatus.AVAILABLE,
                changes={
                    "status": GiftStatus.RESERVED,
                    "reserved_by": name,
                    "reserved_by_phone": phone,
                    "reservation_code": code,
                    "reserved_at": datetime.now(UTC),
                },
            )
        except ConflictError as e:
            logger.warning("Reservation rejected for gift %s: reserved concurrently", gift_id)
            raise ConflictError(GIFT_NOT_AVAILABLE) from e

        logger.info("Gift %s reserved for event %s", gift_id, event)
        return code

    async def mark_purchased(self, gift_id: UUID, event: str, code: str) -> GiftDTO:
        """Mark a reserved gift as purchased. Reservation metadata is kept."""
        gift = await self._transition_reserved(
            gift_id,
            event,
            code,
            changes={
                "status": GiftStatus.PURCHASED,
                "purchased_at": datetime.now(UTC),
            },
        )
        logger.info("Gift %s marked as purchased for event %s", gift_id, event)
        return gift

    async def cancel_reservation(self, gift_id: UUID, event: str, code: str) -> GiftDTO:
        """Release a reserved gift back to available, clearing its reservation."""
        gift = await self._transition_reserved(
            gift_id,
            event,
            code,
            changes={
                "status": GiftStatus.AVAILABLE,
                "reserved_by": None,
                "reserved_by_phone": None,
                "reservation_code": None,
                "reserved_at": None,
            },
        )
        logger.info("Reservation cancelled for gift %s on event %s", gift_id, event)
        return gift

    async def _transition_reserved(
        self, gift_id: UUID, event: str, code: str, changes: dict
    ) -> GiftDTO:
        gift = await self._get_gift(gift_id, event)
        self._check_reserved_with_code(gift, code)
        try:
            return await self._store.transition_gift(
                gift_id,
                event,
                expected_status=GiftStatus.RESERVED,
                changes=changes,
                expected_code=code,
            )
        except ConflictError as e:
            # Lost a race; report against the state that won.
            self._check_reserved_with_code(await self._get_gift(gift_id, event), code)
            raise ConflictError(GIFT_NOT_RESERVED) from e

    async def _get_gift(self, gift_id: UUID, event: str) -> GiftDTO:
        gift = await self._store.find_gift(gift_id, event)
        if gift is None:
            raise NotFoundError(GIFT_NOT_FOUND)
        return gift

    @staticmethod
    def _check_reserved_with_code(gift: GiftDTO, code: str) -> None:
        # The credential is checked before the status.
        if not gift.reservation_code or not code or not secrets.compare_digest(
            gift.reservation_code.encode(), code.encode()
        ):
            logger.warning("Invalid reservation code presented for gift %s", gift.uuid)
            raise InvalidCredentialError(INVALID_RESERVATION_CODE)
        if gift.status != GiftStatus.RESERVED:
            logger.warning("Gift %s is %s, not reserved", gift.uuid, gift.status.value)
            raise ConflictError(GIFT_NOT_RESERVED)
