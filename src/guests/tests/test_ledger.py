"""Tests for RSVP confirmation and guest resolution."""

import asyncio

import pytest

from src.errors import ConflictError
from src.guests.directory import GuestDirectory
from src.guests.ledger import RSVPLedger
from src.guests.tests.inmemory_store import InMemoryGuestStore


@pytest.fixture
def store():
    return InMemoryGuestStore()


@pytest.fixture
def ledger(store):
    return RSVPLedger(store=store)


async def test_confirm_creates_guest_and_rsvp(ledger, store):
    rsvp = await ledger.confirm("Alice Smith", "11987654321", "wedding-ceremony", message="Can't wait!")

    assert rsvp.guest_name == "Alice Smith"
    assert rsvp.event == "wedding-ceremony"
    assert rsvp.message == "Can't wait!"
    assert rsvp.attending is True
    assert rsvp.guest_count == 1
    assert rsvp.confirmed_at is not None
    assert list(store.guests) == ["11987654321"]
    assert len(store.rsvps) == 1


async def test_second_confirm_for_same_event_is_rejected(ledger, store):
    await ledger.confirm("Alice Smith", "11987654321", "wedding-ceremony")

    with pytest.raises(ConflictError, match="already confirmed"):
        await ledger.confirm("Alice Smith", "11987654321", "wedding-ceremony")

    assert len(store.rsvps) == 1


async def test_guest_is_reused_across_events(ledger, store):
    first = await ledger.confirm("Bob Jones", "11912345678", "wedding-ceremony")
    second = await ledger.confirm("Bob Jones", "11912345678", "bridal-shower")

    assert first.guest_id == second.guest_id
    assert len(store.guests) == 1
    assert len(store.rsvps) == 2


async def test_existing_guest_keeps_first_name_recorded(ledger, store):
    await ledger.confirm("Bob Jones", "11912345678", "wedding-ceremony")

    rsvp = await ledger.confirm("Robert Jones", "11912345678", "bridal-shower")

    assert rsvp.guest_name == "Bob Jones"
    assert len(store.guests) == 1


async def test_differently_formatted_phones_resolve_to_one_guest(ledger, store):
    await ledger.confirm("Bob Jones", "(11) 91234-5678", "wedding-ceremony")

    with pytest.raises(ConflictError):
        await ledger.confirm("Bob Jones", "11 91234 5678", "wedding-ceremony")

    assert list(store.guests) == ["11912345678"]


async def test_concurrent_confirms_record_a_single_rsvp(ledger, store):
    results = await asyncio.gather(
        *(ledger.confirm("Carol White", "11955554444", "wedding-ceremony") for _ in range(3)),
        return_exceptions=True,
    )

    successes = [r for r in results if not isinstance(r, Exception)]
    conflicts = [r for r in results if isinstance(r, ConflictError)]
    assert len(successes) == 1
    assert len(conflicts) == 2
    assert len(store.guests) == 1
    assert len(store.rsvps) == 1


async def test_list_by_event_is_scoped_and_ordered(ledger):
    await ledger.confirm("Alice Smith", "11900000001", "wedding-ceremony")
    await ledger.confirm("Bob Jones", "11900000002", "bridal-shower")
    await ledger.confirm("Carol White", "11900000003", "wedding-ceremony")

    rsvps = await ledger.list_by_event("wedding-ceremony")

    assert [r.guest_name for r in rsvps] == ["Alice Smith", "Carol White"]


async def test_list_by_event_without_rsvps(ledger):
    assert await ledger.list_by_event("bridal-shower") == []


async def test_directory_reuses_guest_created_concurrently(store):
    directory = GuestDirectory(store)

    first, second = await asyncio.gather(
        directory.resolve_or_create("Dan Brown", "11977778888"),
        directory.resolve_or_create("Daniel Brown", "11977778888"),
    )

    assert first == second
    assert len(store.guests) == 1
