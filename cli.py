"""CLI commands for wedding registry management."""

import asyncio
from pathlib import Path

import typer

from src.config.database import async_session_manager
from src.config.logging import setup_logging
from src.events import is_known_event
from src.gifts.catalog import CatalogError, load_catalog
from src.gifts.dtos import GiftDTO
from src.gifts.repository.store import SqlGiftStore
from src.guests.dtos import RSVPDTO
from src.guests.repository.store import SqlGuestStore

app = typer.Typer(help="CLI commands for wedding registry management")


@app.callback()
def main():
    setup_logging()


def _check_event(event: str) -> None:
    if not is_known_event(event):
        typer.secho(f"Unknown event: {event}", fg=typer.colors.RED)
        raise typer.Exit(1)


async def _seed_gifts(path: Path) -> list[GiftDTO]:
    gifts = load_catalog(path)
    # One transaction: a catalog is seeded entirely or not at all
    async with async_session_manager() as session:
        store = SqlGiftStore(session_overwrite=session)
        return [await store.add_gift(gift) for gift in gifts]


@app.command()
def seed_gifts(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="JSON gift catalog",
    ),
):
    """Add every gift of a JSON catalog to the registry as available."""
    try:
        added = asyncio.run(_seed_gifts(file))
    except CatalogError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho(f"Added {len(added)} gifts!", fg=typer.colors.GREEN)
    for gift in added:
        typer.secho(f"  - {gift.name} ({gift.event})", fg=typer.colors.BLUE)


@app.command()
def list_gifts(
    event: str = typer.Argument(..., help="Event selector, e.g. wedding-ceremony"),
):
    """Show the gifts of an event and their status."""
    _check_event(event)
    gifts = asyncio.run(SqlGiftStore().list_gifts_by_event(event))

    if not gifts:
        typer.secho("No gifts for this event", fg=typer.colors.YELLOW)
        return

    colors = {"available": typer.colors.GREEN, "reserved": typer.colors.YELLOW, "purchased": typer.colors.MAGENTA}
    for gift in gifts:
        line = f"  {gift.position:>3}. {gift.name} [{gift.status.value}]"
        if gift.reserved_by:
            line += f" by {gift.reserved_by}"
        typer.secho(line, fg=colors[gift.status.value])
        typer.secho(f"       ID: {gift.uuid}", fg=typer.colors.CYAN)


@app.command()
def list_rsvps(
    event: str = typer.Argument(..., help="Event selector, e.g. wedding-ceremony"),
):
    """Show who confirmed attendance at an event."""
    _check_event(event)
    rsvps: list[RSVPDTO] = asyncio.run(SqlGuestStore().list_rsvps_by_event(event))

    typer.secho(f"{len(rsvps)} confirmations for {event}", fg=typer.colors.GREEN)
    for rsvp in rsvps:
        typer.secho(
            f"  - {rsvp.guest_name} ({rsvp.confirmed_at:%Y-%m-%d %H:%M})",
            fg=typer.colors.BLUE,
        )
        if rsvp.message:
            typer.secho(f"    \"{rsvp.message}\"", fg=typer.colors.CYAN)


if __name__ == "__main__":
    app()
