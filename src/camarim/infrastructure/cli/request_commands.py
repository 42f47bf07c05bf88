"""Request (pedido) submenu."""

from __future__ import annotations

import click

from camarim.domain.model.request import Request
from camarim.infrastructure.bootstrap import AppContext
from camarim.infrastructure.cli.menu import (
    MenuOption,
    ok,
    prompt_id,
    prompt_quantity,
    prompt_text,
    run_menu,
)
from camarim.infrastructure.cli.rendering import render_request


def _echo_requests(requests: list[Request], empty: str) -> None:
    if not requests:
        click.echo(empty)
        return
    for request in requests:
        click.echo(render_request(request))
        click.echo()


def show_requests(ctx: AppContext) -> None:
    _echo_requests(ctx.requests.list_all(), "No requests registered.")


def create_request(ctx: AppContext) -> None:
    room_id = prompt_id("Dressing room ID")
    artist_name = prompt_text("Artist name")
    request_id = ctx.requests.create(room_id, artist_name)
    ok(f"Request created with ID {request_id}")


def remove_request(ctx: AppContext) -> None:
    ctx.requests.remove(prompt_id("Request ID"))
    ok("Request removed")


def add_request_item(ctx: AppContext) -> None:
    request_id = prompt_id("Request ID")
    ctx.requests.get(request_id)
    item = ctx.catalog.get(prompt_id("Item ID (from the catalog)"))
    click.echo(f"Selected item: {item.name}")
    quantity = prompt_quantity()
    ctx.requests.add_item(request_id, item.id, item.name, quantity)
    ok("Item added to the request")


def remove_request_item(ctx: AppContext) -> None:
    request_id = prompt_id("Request ID")
    ctx.requests.get(request_id)
    ctx.requests.remove_item(request_id, prompt_id("Item ID"))
    ok("Item removed from the request")


def mark_fulfilled(ctx: AppContext) -> None:
    request_id = prompt_id("Request ID")
    ctx.requests.mark_fulfilled(request_id)
    ok(f"Request #{request_id} marked as fulfilled")


def list_pending(ctx: AppContext) -> None:
    _echo_requests(ctx.requests.list_pending(), "No pending requests.")


def find_requests_by_room(ctx: AppContext) -> None:
    room_id = prompt_id("Dressing room ID")
    _echo_requests(
        ctx.requests.find_by_dressing_room(room_id),
        "No requests found for this dressing room.",
    )


REQUEST_OPTIONS = [
    MenuOption("Show", show_requests),
    MenuOption("Create", create_request),
    MenuOption("Remove", remove_request),
    MenuOption("Add item", add_request_item),
    MenuOption("Remove item", remove_request_item),
    MenuOption("Mark fulfilled", mark_fulfilled),
    MenuOption("List pending", list_pending),
    MenuOption("Find by dressing room", find_requests_by_room),
]


def request_menu(ctx: AppContext) -> None:
    run_menu(ctx, "Requests", REQUEST_OPTIONS)
