"""Text rendering for collections and ledger-owning aggregates.

Single entities render through their own ``display()``; everything here
is a header plus one fixed-width, left-aligned row per entry.
"""

from __future__ import annotations

from camarim.domain.model.catalog_item import CatalogItem
from camarim.domain.model.dressing_room import DressingRoom
from camarim.domain.model.ledger import LedgerEntry, PricedItem, StockEntry
from camarim.domain.model.request import Request
from camarim.domain.model.shopping_list import ShoppingList


def render_catalog(items: list[CatalogItem]) -> str:
    if not items:
        return "No items in the catalog."
    lines = [f"{'ID':<6}{'Name':<30}{'Price':<12}", "-" * 48]
    for item in items:
        lines.append(f"{item.id:<6}{item.name:<30}{str(item.price):<12}")
    return "\n".join(lines)


def render_stock(entries: list[StockEntry]) -> str:
    lines = ["=== STOCK ==="]
    if not entries:
        lines.append("Stock is empty")
        return "\n".join(lines)
    lines.append(f"{'ID':<5}{'Name':<30}{'Quantity':<10}")
    lines.append("-" * 45)
    for entry in entries:
        lines.append(f"{entry.item_id:<5}{entry.name:<30}{entry.quantity:<10}")
    return "\n".join(lines)


def render_dressing_room(room: DressingRoom) -> str:
    lines = [
        "=== DRESSING ROOM ===",
        f"ID: {room.id}",
        f"Name: {room.name}",
        f"Artist ID: {room.artist_id}",
        f"Total items: {room.total_quantity}",
        "",
        "Items:",
    ]
    lines.extend(_quantity_rows(room.items, empty="No items in this dressing room"))
    return "\n".join(lines)


def render_request(request: Request) -> str:
    lines = [
        "=== REQUEST ===",
        f"ID: {request.id}",
        f"Dressing room ID: {request.dressing_room_id}",
        f"Artist: {request.artist_name}",
        f"Status: {request.status.value}",
        "",
        "Items:",
    ]
    lines.extend(_quantity_rows(request.items, empty="No items in this request"))
    return "\n".join(lines)


def render_shopping_list(shopping_list: ShoppingList) -> str:
    lines = [
        "=== SHOPPING LIST ===",
        f"ID: {shopping_list.id}",
        f"Description: {shopping_list.description}",
        "",
        "Items:",
    ]
    items: list[PricedItem] = shopping_list.items
    if not items:
        lines.append("  List is empty")
        return "\n".join(lines)

    lines.append(f"  {'ID':<5}{'Name':<25}{'Qty':<8}{'Unit price':<14}{'Subtotal':<14}")
    lines.append("  " + "-" * 66)
    for item in items:
        lines.append(
            f"  {item.item_id:<5}{item.name:<25}{item.quantity:<8}"
            f"{str(item.unit_price):<14}{str(item.subtotal):<14}"
        )
    lines.append("  " + "-" * 66)
    lines.append(f"  {'TOTAL:':<52}{str(shopping_list.calculate_total()):<14}")
    return "\n".join(lines)


def _quantity_rows(entries: list[LedgerEntry], empty: str) -> list[str]:
    if not entries:
        return [f"  {empty}"]
    rows = [f"  {'ID':<5}{'Name':<30}{'Quantity':<10}", "  " + "-" * 45]
    for entry in entries:
        rows.append(f"  {entry.item_id:<5}{entry.name:<30}{entry.quantity:<10}")
    return rows
