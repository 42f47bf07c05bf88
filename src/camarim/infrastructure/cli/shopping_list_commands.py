"""Shopping list submenu."""

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
from camarim.infrastructure.cli.rendering import render_shopping_list


def show_lists(ctx: AppContext) -> None:
    lists = ctx.shopping_lists.list_all()
    if not lists:
        click.echo("No shopping lists registered.")
        return
    for shopping_list in lists:
        click.echo(render_shopping_list(shopping_list))
        click.echo()


def create_list(ctx: AppContext) -> None:
    list_id = ctx.shopping_lists.create(prompt_text("Description"))
    ok(f"Shopping list created with ID {list_id}")


def remove_list(ctx: AppContext) -> None:
    ctx.shopping_lists.remove(prompt_id("Shopping list ID"))
    ok("Shopping list removed")


def add_list_item(ctx: AppContext) -> None:
    list_id = prompt_id("Shopping list ID")
    ctx.shopping_lists.get(list_id)
    item = ctx.catalog.get(prompt_id("Item ID (from the catalog)"))
    click.echo(f"Selected item: {item.name} - {item.price}")
    quantity = prompt_quantity()
    ctx.shopping_lists.add_item(list_id, item.id, item.name, quantity, item.price)
    ok("Item added to the shopping list")


def remove_list_item(ctx: AppContext) -> None:
    list_id = prompt_id("Shopping list ID")
    ctx.shopping_lists.get(list_id)
    ctx.shopping_lists.remove_item(list_id, prompt_id("Item ID"))
    ok("Item removed from the shopping list")


def update_list_item_quantity(ctx: AppContext) -> None:
    list_id = prompt_id("Shopping list ID")
    ctx.shopping_lists.get(list_id)
    item_id = prompt_id("Item ID")
    quantity = prompt_quantity("New quantity")
    ctx.shopping_lists.update_quantity(list_id, item_id, quantity)
    ok("Quantity updated")


def show_total(ctx: AppContext) -> None:
    list_id = prompt_id("Shopping list ID")
    click.echo(f"Total: {ctx.shopping_lists.calculate_total(list_id)}")


def clear_list(ctx: AppContext) -> None:
    list_id = prompt_id("Shopping list ID")
    ctx.shopping_lists.clear(list_id)
    ok(f"Shopping list #{list_id} cleared")


def rename_list(ctx: AppContext) -> None:
    list_id = prompt_id("Shopping list ID")
    ctx.shopping_lists.set_description(list_id, prompt_text("New description"))
    ok(f"Shopping list #{list_id} renamed")


SHOPPING_LIST_OPTIONS = [
    MenuOption("Show", show_lists),
    MenuOption("Create", create_list),
    MenuOption("Remove", remove_list),
    MenuOption("Add item", add_list_item),
    MenuOption("Remove item", remove_list_item),
    MenuOption("Update quantity", update_list_item_quantity),
    MenuOption("Calculate total", show_total),
    MenuOption("Clear list", clear_list),
    MenuOption("Rename", rename_list),
]


def shopping_list_menu(ctx: AppContext) -> None:
    run_menu(ctx, "Shopping lists", SHOPPING_LIST_OPTIONS)
