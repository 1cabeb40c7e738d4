"""Gift catalog files.

A catalog is a JSON list of gifts::

    [
        {"name": "Cookware Set", "event": "wedding-ceremony", "price": "349.90",
         "external_link": "https://...", "position": 1}
    ]
"""

from decimal import Decimal
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints, TypeAdapter, ValidationError

from src.events import EventName
from src.gifts.dtos import NewGiftDTO


class CatalogError(ValueError):
    pass


class CatalogEntry(BaseModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    event: EventName
    price: Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)] | None = None
    description: str | None = None
    image_url: str | None = None
    external_link: str | None = None
    position: int | None = None


_catalog_adapter = TypeAdapter(list[CatalogEntry])


def _to_gifts(entries: list[CatalogEntry]) -> list[NewGiftDTO]:
    return [
        NewGiftDTO(
            name=entry.name,
            event=entry.event,
            price=entry.price,
            description=entry.description,
            image_url=entry.image_url,
            external_link=entry.external_link,
            # Unpositioned entries keep their order in the file
            position=entry.position if entry.position is not None else index,
        )
        for index, entry in enumerate(entries)
    ]


def parse_catalog(raw: str | bytes) -> list[NewGiftDTO]:
    """Turn a JSON catalog into gifts to add. Any bad entry rejects the whole catalog."""
    try:
        entries = _catalog_adapter.validate_json(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid gift catalog: {e}") from e
    return _to_gifts(entries)


def load_catalog(path: Path) -> list[NewGiftDTO]:
    return parse_catalog(path.read_bytes())
