from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, StringConstraints

from src.events import EventName
from src.gifts.reservation_code import RESERVATION_CODE_LENGTH

ReservationCode = Annotated[
    str,
    StringConstraints(
        min_length=RESERVATION_CODE_LENGTH,
        max_length=RESERVATION_CODE_LENGTH,
    ),
]


class GiftActionRequest(BaseModel):
    """Request body for actions authorized by a reservation code."""

    gift_id: UUID
    event: EventName
    code: ReservationCode
