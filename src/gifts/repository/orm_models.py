from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Enum, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.gifts.dtos import GiftStatus
from src.models.base import Base, TimeStamp


class Gift(Base, TimeStamp):
    __tablename__ = TableNames.GIFTS.value
    __table_args__ = (CheckConstraint("price >= 0", name="ck_gifts_price_non_negative"),)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    external_link: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # Display order within the event's catalog
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    event: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    status: Mapped[GiftStatus] = mapped_column(
        Enum(GiftStatus, name="gift_status_enum", values_callable=lambda x: [e.value for e in x]),
        default=GiftStatus.AVAILABLE,
        nullable=False,
    )

    reserved_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    reserved_by_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    reservation_code: Mapped[str | None] = mapped_column(String(6), nullable=True)
    reserved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    purchased_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Gift {self.name} ({self.event}) - {self.status.value}>"
