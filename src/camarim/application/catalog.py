"""Application service: the item catalog.

Item names are unique (case-sensitive, exact match).
"""

from __future__ import annotations

import logging

from camarim.domain.exceptions import DuplicateNameError, ItemNotFoundError
from camarim.domain.model.catalog_item import CatalogItem
from camarim.domain.model.validation import require_non_empty
from camarim.domain.model.value_objects import Money
from camarim.domain.repository.entity_registry import EntityRegistry

logger = logging.getLogger(__name__)


class Catalog:

    def __init__(self, registry: EntityRegistry[CatalogItem] | None = None) -> None:
        self._registry = registry if registry is not None else EntityRegistry()

    def register(self, name: str, price: Money | str | int | float) -> int:
        """Add a new item to the catalog and return its id."""
        name = require_non_empty(name, "Item name")
        price = Money.of(price)
        if self.find_by_name(name) is not None:
            raise DuplicateNameError(f"An item named '{name}' already exists")

        item_id = self._registry.create(lambda new_id: CatalogItem.create(new_id, name, price))
        logger.info("Registered catalog item #%d '%s' at %s", item_id, name, price)
        return item_id

    def get(self, item_id: int) -> CatalogItem:
        item = self._registry.find_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(f"Item with ID {item_id} not found")
        return item

    def find_by_id(self, item_id: int) -> CatalogItem | None:
        return self._registry.find_by_id(item_id)

    def find_by_name(self, name: str) -> CatalogItem | None:
        """Exact, case-sensitive match on the stripped name."""
        name = name.strip()
        matches = self._registry.find_by(lambda item: item.name == name)
        return matches[0] if matches else None

    def update(self, item_id: int, name: str, price: Money | str | int | float) -> None:
        """Rename and reprice an item.

        The new name may equal the item's own current name but not the
        name of any other item.
        """
        item = self.get(item_id)
        name = require_non_empty(name, "Item name")
        other = self.find_by_name(name)
        if other is not None and other.id != item_id:
            raise DuplicateNameError(f"Another item is already named '{name}'")

        item.update(name, price)
        logger.info("Updated catalog item #%d to '%s' at %s", item_id, item.name, item.price)

    def remove(self, item_id: int) -> None:
        if not self._registry.delete_by_id(item_id):
            raise ItemNotFoundError(f"Item with ID {item_id} not found")
        logger.info("Removed catalog item #%d", item_id)

    def list_all(self) -> list[CatalogItem]:
        return self._registry.list_all()
