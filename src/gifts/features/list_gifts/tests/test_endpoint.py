from datetime import UTC, datetime
from decimal import Decimal

import pytest

from src.gifts.dependencies import get_gift_registry
from src.gifts.dtos import GiftStatus
from src.gifts.registry import GiftRegistry
from src.gifts.tests.inmemory_store import InMemoryGiftStore, make_gift
from src.gifts.urls import GIFTS_BY_EVENT_URL


@pytest.mark.asyncio
async def test_list_gifts_hides_reservation_credentials(client_factory):
    reserved = make_gift(
        name="Espresso Machine",
        price=Decimal("899.00"),
        position=1,
        status=GiftStatus.RESERVED,
        reserved_by="Ann Lee",
        reserved_by_phone="11987654321",
        reservation_code="ABC123",
        reserved_at=datetime(2026, 5, 1, 12, 0, tzinfo=UTC),
    )
    available = make_gift(name="Bath Towels", position=2)
    store = InMemoryGiftStore([reserved, available, make_gift(event="bridal-shower")])
    overrides = {get_gift_registry: lambda: GiftRegistry(store=store)}

    async with client_factory(overrides) as client:
        response = await client.get(GIFTS_BY_EVENT_URL.format(event="wedding-ceremony"))

    assert response.status_code == 200
    data = response.json()
    assert [gift["name"] for gift in data] == ["Espresso Machine", "Bath Towels"]

    first = data[0]
    assert first["status"] == "reserved"
    assert first["reserved_by"] == "Ann Lee"
    assert first["reserved_phone_display"] == "(11) ****-4321"
    assert Decimal(first["price"]) == Decimal("899.00")
    assert "reservation_code" not in first
    assert "reserved_by_phone" not in first
    assert "ABC123" not in response.text
    assert "11987654321" not in response.text

    assert data[1]["status"] == "available"
    assert data[1]["reserved_phone_display"] is None


@pytest.mark.asyncio
async def test_list_gifts_of_empty_event(client_factory):
    overrides = {get_gift_registry: lambda: GiftRegistry(store=InMemoryGiftStore())}

    async with client_factory(overrides) as client:
        response = await client.get(GIFTS_BY_EVENT_URL.format(event="bridal-shower"))

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_gifts_of_unknown_event(client_factory):
    overrides = {get_gift_registry: lambda: GiftRegistry(store=InMemoryGiftStore())}

    async with client_factory(overrides) as client:
        response = await client.get(GIFTS_BY_EVENT_URL.format(event="rehearsal-dinner"))

    assert response.status_code == 404
