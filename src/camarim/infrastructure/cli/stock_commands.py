"""Stock submenu."""

from __future__ import annotations

import click

from camarim.infrastructure.bootstrap import AppContext
from camarim.infrastructure.cli.menu import (
    MenuOption,
    ok,
    prompt_id,
    prompt_quantity,
    run_menu,
)
from camarim.infrastructure.cli.rendering import render_stock


def show_stock(ctx: AppContext) -> None:
    click.echo(render_stock(ctx.stock.list_all()))


def receive_item(ctx: AppContext) -> None:
    item_id = prompt_id("Item ID (from the catalog)")
    item = ctx.catalog.get(item_id)
    click.echo(f"Selected item: {item.name}")
    quantity = prompt_quantity()
    ctx.stock.receive(item_id, quantity)
    ok(f"{quantity} x {item.name} received into stock")


def issue_item(ctx: AppContext) -> None:
    item_id = prompt_id("Item ID")
    quantity = prompt_quantity("Quantity to issue")
    ctx.stock.issue(item_id, quantity)
    ok("Stock issued")


def check_availability(ctx: AppContext) -> None:
    item_id = prompt_id("Item ID")
    quantity = prompt_quantity("Quantity needed")
    if ctx.stock.check_availability(item_id, quantity):
        click.echo(f"Available: {ctx.stock.quantity_of(item_id)} on hand.")
    else:
        click.echo(f"Not available: {ctx.stock.quantity_of(item_id)} on hand.")


def show_quantity(ctx: AppContext) -> None:
    item_id = prompt_id("Item ID")
    click.echo(f"Quantity on hand: {ctx.stock.quantity_of(item_id)}")


def set_quantity(ctx: AppContext) -> None:
    item_id = prompt_id("Item ID")
    quantity = prompt_quantity("New quantity")
    ctx.stock.set_quantity(item_id, quantity)
    ok("Stock quantity updated")


STOCK_OPTIONS = [
    MenuOption("Show", show_stock),
    MenuOption("Receive item", receive_item),
    MenuOption("Issue item", issue_item),
    MenuOption("Check availability", check_availability),
    MenuOption("Quantity on hand", show_quantity),
    MenuOption("Set quantity", set_quantity),
]


def stock_menu(ctx: AppContext) -> None:
    run_menu(ctx, "Stock", STOCK_OPTIONS)
