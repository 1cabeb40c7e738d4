from uuid import uuid4

import pytest

from src.gifts.dependencies import get_gift_registry
from src.gifts.dtos import GiftStatus
from src.gifts.registry import GiftRegistry
from src.gifts.tests.inmemory_store import InMemoryGiftStore, make_gift
from src.gifts.urls import RESERVE_GIFT_URL


def reserve_payload(gift_id, overrides=None):
    payload = {
        "gift_id": str(gift_id),
        "event": "wedding-ceremony",
        "name": "Ann Lee",
        "phone": "(11) 98765-4321",
    }
    payload.update(overrides or {})
    return payload


@pytest.mark.asyncio
async def test_reserve_gift(client_factory):
    gift = make_gift()
    store = InMemoryGiftStore([gift])
    overrides = {get_gift_registry: lambda: GiftRegistry(store=store)}

    async with client_factory(overrides) as client:
        response = await client.post(RESERVE_GIFT_URL, json=reserve_payload(gift.uuid))

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Gift reserved successfully!"
    code = data["data"]["reservationCode"]
    assert len(code) == 6
    assert store.get(gift.uuid).status == GiftStatus.RESERVED
    assert store.get(gift.uuid).reservation_code == code
    assert store.get(gift.uuid).reserved_by == "Ann Lee"


@pytest.mark.asyncio
async def test_reserve_reserved_gift(client_factory):
    gift = make_gift(status=GiftStatus.RESERVED, reserved_by="Bob Hill", reservation_code="ABC123")
    store = InMemoryGiftStore([gift])
    overrides = {get_gift_registry: lambda: GiftRegistry(store=store)}

    async with client_factory(overrides) as client:
        response = await client.post(RESERVE_GIFT_URL, json=reserve_payload(gift.uuid))

    assert response.status_code == 409
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "This gift is not available for reservation."
    assert data["data"] is None
    assert store.get(gift.uuid).reserved_by == "Bob Hill"


@pytest.mark.asyncio
async def test_reserve_unknown_gift(client_factory):
    overrides = {get_gift_registry: lambda: GiftRegistry(store=InMemoryGiftStore())}

    async with client_factory(overrides) as client:
        response = await client.post(RESERVE_GIFT_URL, json=reserve_payload(uuid4()))

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Gift not found.", "data": None}


@pytest.mark.asyncio
async def test_reserve_gift_through_wrong_event(client_factory):
    gift = make_gift()
    overrides = {get_gift_registry: lambda: GiftRegistry(store=InMemoryGiftStore([gift]))}

    async with client_factory(overrides) as client:
        response = await client.post(
            RESERVE_GIFT_URL, json=reserve_payload(gift.uuid, {"event": "bridal-shower"})
        )

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"event": "rehearsal-dinner"},
        {"name": "Al"},
        {"name": "A" * 101},
        {"phone": "12345"},
        {"phone": "1" * 21},
        {"gift_id": "not-a-uuid"},
    ],
)
async def test_reserve_gift_validation(client_factory, overrides):
    gift = make_gift()
    store = InMemoryGiftStore([gift])
    dependency_overrides = {get_gift_registry: lambda: GiftRegistry(store=store)}

    async with client_factory(dependency_overrides) as client:
        response = await client.post(RESERVE_GIFT_URL, json=reserve_payload(gift.uuid, overrides))

    assert response.status_code == 422
    assert store.get(gift.uuid).status == GiftStatus.AVAILABLE
