"""Event selectors.

Gifts and RSVPs are scoped to a named event such as ``wedding-ceremony``. The
set of accepted selectors comes from settings, so new events are a
configuration change. The registry and ledger treat an event as an opaque
string; it is validated here, at the edge of the API.
"""

from typing import Annotated

from fastapi import HTTPException
from pydantic import AfterValidator

from src.config.settings import settings


def is_known_event(event: str) -> bool:
    return event in settings.events


def validate_event(event: str) -> str:
    """Pydantic validator for event selectors in request bodies."""
    if not is_known_event(event):
        raise ValueError(f"Unknown event '{event}'. Expected one of: {', '.join(settings.events)}")
    return event


def get_event(event: str) -> str:
    """Dependency resolving the ``{event}`` path parameter."""
    if not is_known_event(event):
        raise HTTPException(status_code=404, detail=f"Unknown event '{event}'")
    return event


EventName = Annotated[str, AfterValidator(validate_event)]
