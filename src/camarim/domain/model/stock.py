"""Stock aggregate: the venue's single central on-hand quantity per item.

Absence from the ledger means "zero on hand". Stock is the only ledger
that accepts zero-quantity receipts and direct quantity overwrites.
"""

from __future__ import annotations

from camarim.domain.exceptions import StockItemNotFoundError
from camarim.domain.model.ledger import QuantityLedger, StockEntry


class Stock:
    """Aggregate root for central stock.

    Invariants:
    - one entry per catalog item id
    - an entry whose quantity reaches zero is removed
    """

    def __init__(self) -> None:
        self._ledger: QuantityLedger[StockEntry] = QuantityLedger(
            StockEntry,
            owner="stock",
            missing_error=StockItemNotFoundError,
            allow_zero_receipt=True,
        )

    def receive(self, item_id: int, name: str, quantity: int) -> None:
        """Add units to stock, merging with what is already on hand.

        A zero quantity is accepted and changes nothing.
        """
        self._ledger.upsert_add(item_id, name, quantity)

    def issue(self, item_id: int, quantity: int) -> None:
        """Take units out of stock.

        Raises StockItemNotFoundError if the item is not in stock and
        InsufficientQuantityError if fewer than *quantity* units are on hand.
        """
        self._ledger.subtract(item_id, quantity)

    def check_availability(self, item_id: int, quantity: int) -> bool:
        return item_id in self._ledger and self._ledger.quantity_of(item_id) >= quantity

    def quantity_of(self, item_id: int) -> int:
        return self._ledger.quantity_of(item_id)

    def set_quantity(self, item_id: int, quantity: int) -> None:
        """Overwrite the on-hand quantity of an item already in stock."""
        self._ledger.replace(item_id, quantity)

    def list_all(self) -> list[StockEntry]:
        return self._ledger.entries()

    def __len__(self) -> int:
        return len(self._ledger)
