from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy_utils import UUIDType

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp

# Named so storage can tell duplicates apart from other integrity failures
GUEST_PHONE_INDEX = "ix_guests_phone"
RSVP_GUEST_EVENT_CONSTRAINT = "uq_rsvps_guest_id_event"


class Guest(Base, TimeStamp):
    __tablename__ = TableNames.GUESTS.value

    full_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Digits only; the natural dedup key for guests
    phone: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)

    rsvps: Mapped[list["RSVP"]] = relationship("RSVP", back_populates="guest")

    def __repr__(self) -> str:
        return f"<Guest {self.full_name}>"


class RSVP(Base):
    __tablename__ = TableNames.RSVPS.value
    __table_args__ = (UniqueConstraint("guest_id", "event", name=RSVP_GUEST_EVENT_CONSTRAINT),)

    guest_id: Mapped[UUID] = mapped_column(
        UUIDType(binary=False),
        ForeignKey(f"{TableNames.GUESTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    guest: Mapped["Guest"] = relationship("Guest", back_populates="rsvps")

    event: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    attending: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    guest_count: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    confirmed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<RSVP {self.guest_id} - {self.event}>"
