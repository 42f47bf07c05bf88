"""CatalogItem aggregate.

Catalog items live independently of stock, rooms, requests and shopping
lists. Those ledgers copy the item's id and name (and price for shopping
lists) when the item is added, so a later rename or repricing here does
not reach them.
"""

from __future__ import annotations

from dataclasses import dataclass

from camarim.domain.model.validation import require_non_empty, require_non_negative_id
from camarim.domain.model.value_objects import Money


@dataclass(eq=False)
class CatalogItem:
    """A purchasable / trackable item. Two items are equal when their ids are."""

    id: int
    name: str
    price: Money

    @staticmethod
    def create(item_id: int, name: str, price: Money | str | int | float) -> CatalogItem:
        require_non_negative_id(item_id)
        return CatalogItem(
            id=item_id,
            name=require_non_empty(name, "Item name"),
            price=Money.of(price),
        )

    def rename(self, name: str) -> None:
        self.name = require_non_empty(name, "Item name")

    def update_price(self, new_price: Money | str | int | float) -> None:
        self.price = Money.of(new_price)

    def update(self, name: str, price: Money | str | int | float) -> None:
        """Change name and price together; nothing changes if either is invalid."""
        name = require_non_empty(name, "Item name")
        price = Money.of(price)
        self.name = name
        self.price = price

    def display(self) -> str:
        return f"Item [ID: {self.id}, Name: {self.name}, Price: {self.price}]"

    def __str__(self) -> str:
        return self.display()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
