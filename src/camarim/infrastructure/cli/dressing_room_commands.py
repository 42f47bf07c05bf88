"""Dressing room (camarim) submenu."""

from __future__ import annotations

import click

from camarim.infrastructure.bootstrap import AppContext
from camarim.infrastructure.cli.menu import (
    MenuOption,
    ok,
    prompt_id,
    prompt_quantity,
    prompt_text,
    run_menu,
)
from camarim.infrastructure.cli.rendering import render_dressing_room


def show_rooms(ctx: AppContext) -> None:
    rooms = ctx.dressing_rooms.list_all()
    if not rooms:
        click.echo("No dressing rooms registered.")
        return
    for room in rooms:
        click.echo(render_dressing_room(room))
        click.echo()


def register_room(ctx: AppContext) -> None:
    name = prompt_text("Dressing room name")
    artist_id = prompt_id("Artist ID (0 for none)")
    room_id = ctx.dressing_rooms.register(name, artist_id)
    ok(f"Dressing room registered with ID {room_id}")


def remove_room(ctx: AppContext) -> None:
    ctx.dressing_rooms.remove(prompt_id("Dressing room ID"))
    ok("Dressing room removed")


def add_room_item(ctx: AppContext) -> None:
    room_id = prompt_id("Dressing room ID")
    ctx.dressing_rooms.get(room_id)
    item = ctx.catalog.get(prompt_id("Item ID (from the catalog)"))
    click.echo(f"Selected item: {item.name}")
    quantity = prompt_quantity()
    ctx.dressing_rooms.add_item(room_id, item.id, item.name, quantity)
    ok("Item added to the dressing room")


def remove_room_item(ctx: AppContext) -> None:
    room_id = prompt_id("Dressing room ID")
    ctx.dressing_rooms.get(room_id)
    item_id = prompt_id("Item ID")
    quantity = prompt_quantity("Quantity to remove")
    ctx.dressing_rooms.remove_item(room_id, item_id, quantity)
    ok("Item removed from the dressing room")


def update_room(ctx: AppContext) -> None:
    room_id = prompt_id("Dressing room ID")
    ctx.dressing_rooms.get(room_id)
    name = prompt_text("New name")
    artist_id = prompt_id("New artist ID (0 for none)")
    ctx.dressing_rooms.update(room_id, name, artist_id)
    ok("Dressing room updated")


def find_room_by_artist(ctx: AppContext) -> None:
    artist_id = prompt_id("Artist ID")
    room = ctx.dressing_rooms.find_by_artist(artist_id)
    if room is None:
        click.echo("No dressing room found for this artist.")
        return
    click.echo(render_dressing_room(room))


def link_artist(ctx: AppContext) -> None:
    room_id = prompt_id("Dressing room ID")
    artist_id = prompt_id("Artist ID")
    ctx.assignments.link(artist_id, room_id)
    ok(f"Artist #{artist_id} assigned to dressing room #{room_id}")


def release_artist(ctx: AppContext) -> None:
    room_id = prompt_id("Dressing room ID")
    ctx.assignments.unlink_room(room_id)
    ok(f"Dressing room #{room_id} released")


DRESSING_ROOM_OPTIONS = [
    MenuOption("Show", show_rooms),
    MenuOption("Register", register_room),
    MenuOption("Remove", remove_room),
    MenuOption("Add item", add_room_item),
    MenuOption("Remove item", remove_room_item),
    MenuOption("Update", update_room),
    MenuOption("Find by artist", find_room_by_artist),
    MenuOption("Assign artist", link_artist),
    MenuOption("Release artist", release_artist),
]


def dressing_room_menu(ctx: AppContext) -> None:
    run_menu(ctx, "Dressing rooms", DRESSING_ROOM_OPTIONS)
