"""Gift storage. Stores return DTOs, never ORM models."""

from abc import ABC, abstractmethod
from functools import partial
from typing import Any
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.errors import ConflictError, NotFoundError
from src.gifts.dtos import GiftDTO, GiftStatus, NewGiftDTO
from src.gifts.repository.orm_models import Gift


class GiftStore(ABC):
    @abstractmethod
    async def find_gift(self, gift_id: UUID, event: str) -> GiftDTO | None:
        """Get a gift by id, scoped to its event. Returns None if absent."""
        raise NotImplementedError

    @abstractmethod
    async def transition_gift(
        self,
        gift_id: UUID,
        event: str,
        expected_status: GiftStatus,
        changes: dict[str, Any],
        expected_code: str | None = None,
    ) -> GiftDTO:
        """Apply changes to a gift in one atomic step.

        The update only happens if the gift is still in expected_status (and
        still holds expected_code, when given).

        Raises:
            NotFoundError: no gift for (gift_id, event)
            ConflictError: the gift no longer matches the expected state
        """
        raise NotImplementedError

    @abstractmethod
    async def list_gifts_by_event(self, event: str) -> list[GiftDTO]:
        raise NotImplementedError

    @abstractmethod
    async def add_gift(self, gift: NewGiftDTO) -> GiftDTO:
        """Add a catalog entry as an available gift."""
        raise NotImplementedError


class SqlGiftStore(GiftStore):
    """SQL implementation of the gift store."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def find_gift(self, gift_id: UUID, event: str) -> GiftDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            gift = await self._get_gift(session, gift_id, event)
            return GiftDTO.from_gift(gift) if gift else None

    async def transition_gift(
        self,
        gift_id: UUID,
        event: str,
        expected_status: GiftStatus,
        changes: dict[str, Any],
        expected_code: str | None = None,
    ) -> GiftDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = update(Gift).where(
                Gift.uuid == gift_id,
                Gift.event == event,
                Gift.status == expected_status,
            )
            if expected_code is not None:
                stmt = stmt.where(Gift.reservation_code == expected_code)
            result = await session.execute(
                stmt.values(**changes).execution_options(synchronize_session=False)
            )

            if result.rowcount == 0:
                if await self._get_gift(session, gift_id, event) is None:
                    raise NotFoundError("Gift not found.")
                raise ConflictError(f"Gift is no longer {expected_status.value}.")

            gift = await self._get_gift(session, gift_id, event)
            return GiftDTO.from_gift(gift)

    async def list_gifts_by_event(self, event: str) -> list[GiftDTO]:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(Gift).where(Gift.event == event).order_by(Gift.position, Gift.name)
            )
            return [GiftDTO.from_gift(gift) for gift in result.scalars().all()]

    async def add_gift(self, gift: NewGiftDTO) -> GiftDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            orm_gift = Gift(
                name=gift.name,
                event=gift.event,
                price=gift.price,
                description=gift.description,
                image_url=gift.image_url,
                external_link=gift.external_link,
                position=gift.position,
                status=GiftStatus.AVAILABLE,
            )
            session.add(orm_gift)
            await session.flush()
            await session.refresh(orm_gift)
            return GiftDTO.from_gift(orm_gift)

    async def _get_gift(self, session, gift_id: UUID, event: str) -> Gift | None:
        """Get the gift row, bypassing any stale copy in the session's identity map."""
        result = await session.execute(
            select(Gift)
            .where(Gift.uuid == gift_id, Gift.event == event)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
