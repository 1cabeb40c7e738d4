"""Phone number helpers shared by the guest directory and the gift registry."""

import re

_NON_DIGITS = re.compile(r"\D")


def normalize_phone(raw: str) -> str:
    """Reduce a phone number to its digits so formatting differences dedupe to one guest.

    Falls back to the stripped input when it carries no digits at all.
    """
    stripped = raw.strip()
    digits = _NON_DIGITS.sub("", stripped)
    return digits or stripped


def mask_phone_for_display(raw: str | None) -> str | None:
    """Mask a phone number for public display.

    (11) 98765-4321 -> (11) ****-4321
    """
    if not raw:
        return None
    digits = _NON_DIGITS.sub("", raw)
    if len(digits) in (10, 11):
        return f"({digits[:2]}) ****-{digits[-4:]}"
    return f"****-{digits[-4:]}"
