"""Catalog submenu."""

from __future__ import annotations

import click

from camarim.infrastructure.bootstrap import AppContext
from camarim.infrastructure.cli.menu import (
    MenuOption,
    ok,
    prompt_id,
    prompt_price,
    prompt_text,
    run_menu,
)
from camarim.infrastructure.cli.rendering import render_catalog


def show_catalog(ctx: AppContext) -> None:
    click.echo(render_catalog(ctx.catalog.list_all()))


def register_item(ctx: AppContext) -> None:
    name = prompt_text("Item name")
    price = prompt_price()
    item_id = ctx.catalog.register(name, price)
    ok(f"Item registered with ID {item_id}")


def remove_item(ctx: AppContext) -> None:
    ctx.catalog.remove(prompt_id("Item ID"))
    ok("Item removed")


def update_item(ctx: AppContext) -> None:
    item_id = prompt_id("Item ID")
    ctx.catalog.get(item_id)
    name = prompt_text("New name")
    price = prompt_price("New unit price")
    ctx.catalog.update(item_id, name, price)
    ok("Item updated")


def find_item_by_name(ctx: AppContext) -> None:
    name = prompt_text("Item name")
    item = ctx.catalog.find_by_name(name)
    if item is None:
        click.echo(f"No item named '{name}'.")
        return
    click.echo(item.display())


CATALOG_OPTIONS = [
    MenuOption("Show", show_catalog),
    MenuOption("Register", register_item),
    MenuOption("Remove", remove_item),
    MenuOption("Update", update_item),
    MenuOption("Find by name", find_item_by_name),
]


def catalog_menu(ctx: AppContext) -> None:
    run_menu(ctx, "Catalog", CATALOG_OPTIONS)
