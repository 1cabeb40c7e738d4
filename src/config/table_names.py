from enum import Enum


class TableNames(str, Enum):
    GUESTS = "guests"
    RSVPS = "rsvps"
    GIFTS = "gifts"
