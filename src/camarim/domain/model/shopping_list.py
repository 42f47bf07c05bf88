"""ShoppingList aggregate: a priced wish-list of items.

Each line keeps the unit price it was first added with. Subtotals are
always ``quantity * unit_price`` and the list total is their sum.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from camarim.domain.exceptions import ShoppingListItemNotFoundError
from camarim.domain.model.ledger import PricedItem, QuantityLedger
from camarim.domain.model.validation import (
    require_non_empty,
    require_non_negative_id,
    require_positive,
)
from camarim.domain.model.value_objects import Money


@dataclass
class ShoppingList:

    id: int
    description: str
    _items: QuantityLedger[PricedItem] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._items = QuantityLedger(
            PricedItem,
            owner=f"shopping list #{self.id}",
            missing_error=ShoppingListItemNotFoundError,
        )

    @staticmethod
    def create(list_id: int, description: str) -> ShoppingList:
        require_non_negative_id(list_id)
        return ShoppingList(
            id=list_id,
            description=require_non_empty(description, "Description"),
        )

    def set_description(self, description: str) -> None:
        self.description = require_non_empty(description, "Description")

    # --- Items ----------------------------------------------------------------

    def add_item(
        self,
        item_id: int,
        item_name: str,
        quantity: int,
        unit_price: Money | str | int | float,
    ) -> None:
        """Add units of an item.

        Re-adding an item sums the quantity and keeps the price stored
        the first time.
        """
        price = Money.of(unit_price)
        self._items.upsert_add(item_id, item_name, quantity, unit_price=price)

    def remove_item(self, item_id: int) -> bool:
        """Drop an item from the list. Returns False if it was not on it."""
        return self._items.remove_key(item_id)

    def update_quantity(self, item_id: int, quantity: int) -> None:
        """Replace the quantity of a listed item (not additive)."""
        if item_id not in self._items:
            raise ShoppingListItemNotFoundError(
                f"Item ID {item_id} not found in shopping list #{self.id}"
            )
        require_positive(quantity)
        self._items.replace(item_id, quantity)

    def clear(self) -> None:
        self._items.clear()

    @property
    def items(self) -> list[PricedItem]:
        return self._items.entries()

    def calculate_total(self) -> Money:
        return self._items.total(lambda item: item.subtotal, start=Money.zero())
