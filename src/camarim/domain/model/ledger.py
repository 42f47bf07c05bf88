"""QuantityLedger: keyed aggregation of item quantities.

Stock, dressing rooms, requests and shopping lists all hold a small map of
``item_id -> entry`` with the same merge / subtract / evict-on-zero rules.
The ledger owns those rules once; the owning aggregate decides which
not-found error to raise and whether zero-quantity receipts are allowed.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from camarim.domain.exceptions import (
    EntityNotFoundError,
    InsufficientQuantityError,
)
from camarim.domain.model.validation import (
    require_non_empty,
    require_non_negative,
    require_non_negative_id,
    require_positive,
)
from camarim.domain.model.value_objects import Money


@dataclass
class LedgerEntry:
    """One line of a ledger. ``name`` is a copy taken from the catalog."""

    item_id: int
    name: str
    quantity: int


@dataclass
class StockEntry(LedgerEntry):
    pass


@dataclass
class RoomItem(LedgerEntry):
    pass


@dataclass
class RequestItem(LedgerEntry):
    pass


@dataclass
class PricedItem(LedgerEntry):
    """Shopping list line. The unit price is fixed at first insertion."""

    unit_price: Money = field(default_factory=Money.zero)

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


E = TypeVar("E", bound=LedgerEntry)


class QuantityLedger(Generic[E]):
    """Aggregate quantities per item id.

    Invariants:
    - at most one entry per ``item_id``
    - no stored entry ever has quantity 0
    """

    def __init__(
        self,
        entry_type: type[E],
        *,
        owner: str,
        missing_error: type[EntityNotFoundError],
        allow_zero_receipt: bool = False,
    ) -> None:
        self._entry_type = entry_type
        self._owner = owner
        self._missing_error = missing_error
        self._allow_zero_receipt = allow_zero_receipt
        self._entries: dict[int, E] = {}

    # --- Mutations ------------------------------------------------------------

    def upsert_add(self, item_id: int, name: str, quantity: int, **extra) -> None:
        """Add *quantity* units, merging into an existing entry.

        The stored name (and any ``extra`` fields such as unit price) are
        only taken on first insertion.
        """
        require_non_negative_id(item_id, "Item ID")
        name = require_non_empty(name, "Item name")
        if self._allow_zero_receipt:
            require_non_negative(quantity)
        else:
            require_positive(quantity)

        existing = self._entries.get(item_id)
        if existing is not None:
            existing.quantity += quantity
        elif quantity > 0:
            self._entries[item_id] = self._entry_type(
                item_id=item_id, name=name, quantity=quantity, **extra
            )

    def subtract(self, item_id: int, quantity: int) -> None:
        """Take *quantity* units away; the entry disappears when it hits zero."""
        entry = self._require(item_id)
        require_positive(quantity)
        if entry.quantity < quantity:
            raise InsufficientQuantityError(
                f"Insufficient quantity of {entry.name} in {self._owner} "
                f"(available {entry.quantity}, requested {quantity})",
                available=entry.quantity,
                requested=quantity,
            )
        entry.quantity -= quantity
        if entry.quantity == 0:
            del self._entries[item_id]

    def replace(self, item_id: int, quantity: int) -> None:
        """Overwrite the quantity of an existing entry (not additive)."""
        entry = self._require(item_id)
        require_non_negative(quantity)
        entry.quantity = quantity
        if quantity == 0:
            del self._entries[item_id]

    def remove_key(self, item_id: int) -> bool:
        """Drop the entry whatever its quantity. Returns False if absent."""
        return self._entries.pop(item_id, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    # --- Queries --------------------------------------------------------------

    def get(self, item_id: int) -> E | None:
        entry = self._entries.get(item_id)
        return dataclasses.replace(entry) if entry is not None else None

    def quantity_of(self, item_id: int) -> int:
        entry = self._entries.get(item_id)
        return entry.quantity if entry is not None else 0

    def total(self, weight: Callable[[E], Any] | None = None, start: Any = 0) -> Any:
        """Fold ``weight(entry)`` over all entries (defaults to quantity)."""
        if weight is None:
            weight = _quantity
        return sum((weight(entry) for entry in self._entries.values()), start)

    def entries(self) -> list[E]:
        """Snapshot of all entries ordered by item id."""
        return [dataclasses.replace(self._entries[key]) for key in sorted(self._entries)]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # --- Internal helpers -----------------------------------------------------

    def _require(self, item_id: int) -> E:
        entry = self._entries.get(item_id)
        if entry is None:
            raise self._missing_error(
                f"Item ID {item_id} not found in {self._owner}"
            )
        return entry


def _quantity(entry: LedgerEntry) -> int:
    return entry.quantity
