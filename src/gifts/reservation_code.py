"""Reservation codes: short bearer credentials authorizing purchase and cancel.

Codes are not checked for uniqueness against existing reservations; a
collision is only ever compared against the one gift it was issued for.
"""

import secrets
import string

RESERVATION_CODE_ALPHABET = string.ascii_uppercase + string.digits
RESERVATION_CODE_LENGTH = 6


def generate_reservation_code() -> str:
    return "".join(
        secrets.choice(RESERVATION_CODE_ALPHABET) for _ in range(RESERVATION_CODE_LENGTH)
    )
