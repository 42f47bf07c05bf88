"""Artist submenu."""

from __future__ import annotations

import click

from camarim.infrastructure.bootstrap import AppContext
from camarim.infrastructure.cli.menu import (
    MenuOption,
    ok,
    prompt_id,
    prompt_text,
    run_menu,
)


def show_artists(ctx: AppContext) -> None:
    artists = ctx.artists.list_all()
    if not artists:
        click.echo("No artists registered.")
        return
    for artist in artists:
        click.echo(artist.display())


def register_artist(ctx: AppContext) -> None:
    name = prompt_text("Artist name")
    room_id = prompt_id("Dressing room ID (0 for none)")
    artist_id = ctx.artists.register(name, room_id)
    ok(f"Artist registered with ID {artist_id}")


def remove_artist(ctx: AppContext) -> None:
    ctx.artists.remove(prompt_id("Artist ID"))
    ok("Artist removed")


def update_artist(ctx: AppContext) -> None:
    artist_id = prompt_id("Artist ID")
    ctx.artists.get(artist_id)
    name = prompt_text("New name")
    room_id = prompt_id("New dressing room ID (0 for none)")
    ctx.artists.update(artist_id, name, room_id)
    ok("Artist updated")


def find_artists_by_room(ctx: AppContext) -> None:
    room_id = prompt_id("Dressing room ID")
    artists = ctx.artists.find_by_dressing_room(room_id)
    if not artists:
        click.echo("No artists found for this dressing room.")
        return
    click.echo(f"=== Artists in dressing room {room_id} ===")
    for artist in artists:
        click.echo(artist.display())


def unlink_artist(ctx: AppContext) -> None:
    artist_id = prompt_id("Artist ID")
    ctx.assignments.unlink_artist(artist_id)
    ok(f"Artist #{artist_id} no longer has a dressing room")


ARTIST_OPTIONS = [
    MenuOption("Show", show_artists),
    MenuOption("Register", register_artist),
    MenuOption("Remove", remove_artist),
    MenuOption("Update", update_artist),
    MenuOption("Find by dressing room", find_artists_by_room),
    MenuOption("Release dressing room", unlink_artist),
]


def artist_menu(ctx: AppContext) -> None:
    run_menu(ctx, "Artists", ARTIST_OPTIONS)
