from src.guests.ledger import RSVPLedger
from src.guests.repository.store import SqlGuestStore


def get_rsvp_ledger() -> RSVPLedger:
    """Dependency to get RSVP ledger instance."""
    return RSVPLedger(store=SqlGuestStore())
