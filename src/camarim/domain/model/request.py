"""Request (pedido) aggregate: a dressing room's ask for supplies.

A request starts PENDING and can be marked FULFILLED exactly once. While
pending its items may change; once fulfilled the item list is frozen.
Fulfilling a request does not move stock; that stays a separate,
explicit stock operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from camarim.domain.exceptions import InvalidOperationError, RequestItemNotFoundError
from camarim.domain.model.ledger import QuantityLedger, RequestItem
from camarim.domain.model.validation import require_non_empty, require_non_negative_id


class RequestStatus(Enum):
    PENDING = "PENDING"
    FULFILLED = "FULFILLED"


@dataclass
class Request:

    id: int
    dressing_room_id: int
    artist_name: str
    status: RequestStatus = RequestStatus.PENDING
    _items: QuantityLedger[RequestItem] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._items = QuantityLedger(
            RequestItem,
            owner=f"request #{self.id}",
            missing_error=RequestItemNotFoundError,
        )

    @staticmethod
    def create(request_id: int, dressing_room_id: int, artist_name: str) -> Request:
        """Open a new pending request.

        The dressing room id is not checked against the room directory.
        """
        require_non_negative_id(request_id)
        return Request(
            id=request_id,
            dressing_room_id=require_non_negative_id(dressing_room_id, "Dressing room ID"),
            artist_name=require_non_empty(artist_name, "Artist name"),
        )

    @property
    def fulfilled(self) -> bool:
        return self.status == RequestStatus.FULFILLED

    # --- State transitions ----------------------------------------------------

    def mark_fulfilled(self) -> None:
        """Transition PENDING -> FULFILLED."""
        if self.fulfilled:
            raise InvalidOperationError(f"Request #{self.id} is already fulfilled")
        self.status = RequestStatus.FULFILLED

    # --- Items ----------------------------------------------------------------

    def add_item(self, item_id: int, item_name: str, quantity: int) -> None:
        self._assert_pending("add items to")
        self._items.upsert_add(item_id, item_name, quantity)

    def remove_item(self, item_id: int) -> bool:
        """Detach an item entirely. Returns False if it was not requested."""
        self._assert_pending("remove items from")
        return self._items.remove_key(item_id)

    @property
    def items(self) -> list[RequestItem]:
        return self._items.entries()

    @property
    def total_quantity(self) -> int:
        return self._items.total()

    # --- Internal helpers -----------------------------------------------------

    def _assert_pending(self, action: str) -> None:
        if self.fulfilled:
            raise InvalidOperationError(
                f"Cannot {action} request #{self.id} - it is already fulfilled"
            )
