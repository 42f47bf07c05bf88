"""Application service: shopping lists."""

from __future__ import annotations

import logging

from camarim.domain.exceptions import ShoppingListItemNotFoundError, ShoppingListNotFoundError
from camarim.domain.model.ledger import PricedItem
from camarim.domain.model.shopping_list import ShoppingList
from camarim.domain.model.value_objects import Money
from camarim.domain.repository.entity_registry import EntityRegistry

logger = logging.getLogger(__name__)


class ShoppingListDirectory:

    def __init__(self, registry: EntityRegistry[ShoppingList] | None = None) -> None:
        self._registry = registry if registry is not None else EntityRegistry()

    def create(self, description: str) -> int:
        list_id = self._registry.create(
            lambda new_id: ShoppingList.create(new_id, description)
        )
        logger.info("Created shopping list #%d", list_id)
        return list_id

    def get(self, list_id: int) -> ShoppingList:
        shopping_list = self._registry.find_by_id(list_id)
        if shopping_list is None:
            raise ShoppingListNotFoundError(f"Shopping list with ID {list_id} not found")
        return shopping_list

    def find_by_id(self, list_id: int) -> ShoppingList | None:
        return self._registry.find_by_id(list_id)

    def set_description(self, list_id: int, description: str) -> None:
        self.get(list_id).set_description(description)
        logger.info("Renamed shopping list #%d", list_id)

    def remove(self, list_id: int) -> None:
        if not self._registry.delete_by_id(list_id):
            raise ShoppingListNotFoundError(f"Shopping list with ID {list_id} not found")
        logger.info("Removed shopping list #%d", list_id)

    def list_all(self) -> list[ShoppingList]:
        return self._registry.list_all()

    # --- List items -----------------------------------------------------------

    def add_item(
        self,
        list_id: int,
        item_id: int,
        item_name: str,
        quantity: int,
        unit_price: Money | str | int | float,
    ) -> None:
        self.get(list_id).add_item(item_id, item_name, quantity, unit_price)
        logger.info("Added %d x '%s' to shopping list #%d", quantity, item_name, list_id)

    def remove_item(self, list_id: int, item_id: int) -> None:
        if not self.get(list_id).remove_item(item_id):
            raise ShoppingListItemNotFoundError(
                f"Item ID {item_id} not found in shopping list #{list_id}"
            )
        logger.info("Removed item #%d from shopping list #%d", item_id, list_id)

    def update_quantity(self, list_id: int, item_id: int, quantity: int) -> None:
        self.get(list_id).update_quantity(item_id, quantity)
        logger.info("Set item #%d on shopping list #%d to %d", item_id, list_id, quantity)

    def calculate_total(self, list_id: int) -> Money:
        return self.get(list_id).calculate_total()

    def clear(self, list_id: int) -> None:
        self.get(list_id).clear()
        logger.info("Cleared shopping list #%d", list_id)

    def list_items(self, list_id: int) -> list[PricedItem]:
        return self.get(list_id).items
