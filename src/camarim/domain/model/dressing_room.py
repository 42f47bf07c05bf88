"""DressingRoom (camarim) aggregate.

Each room owns its own item ledger. Items are added and removed in
positive amounts; an item whose count drops to zero leaves the room.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from camarim.domain.exceptions import RoomItemNotFoundError
from camarim.domain.model.ledger import QuantityLedger, RoomItem
from camarim.domain.model.validation import require_non_empty, require_non_negative_id


@dataclass
class DressingRoom:
    """Aggregate root for a dressing room.

    ``artist_id`` is 0 when no artist is assigned.
    """

    id: int
    name: str
    artist_id: int = 0
    _items: QuantityLedger[RoomItem] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._items = QuantityLedger(
            RoomItem,
            owner=f"dressing room #{self.id}",
            missing_error=RoomItemNotFoundError,
        )

    @staticmethod
    def create(room_id: int, name: str, artist_id: int = 0) -> DressingRoom:
        require_non_negative_id(room_id)
        return DressingRoom(
            id=room_id,
            name=require_non_empty(name, "Dressing room name"),
            artist_id=require_non_negative_id(artist_id, "Artist ID"),
        )

    # --- Fields ---------------------------------------------------------------

    def rename(self, name: str) -> None:
        self.name = require_non_empty(name, "Dressing room name")

    def assign_artist(self, artist_id: int) -> None:
        self.artist_id = require_non_negative_id(artist_id, "Artist ID")

    def update(self, name: str, artist_id: int) -> None:
        name = require_non_empty(name, "Dressing room name")
        require_non_negative_id(artist_id, "Artist ID")
        self.name = name
        self.artist_id = artist_id

    # --- Items ----------------------------------------------------------------

    def add_item(self, item_id: int, item_name: str, quantity: int) -> None:
        self._items.upsert_add(item_id, item_name, quantity)

    def remove_item(self, item_id: int, quantity: int) -> None:
        """Take *quantity* units of an item out of the room.

        Raises RoomItemNotFoundError if the room does not hold the item and
        InsufficientQuantityError if it holds fewer than *quantity* units.
        """
        self._items.subtract(item_id, quantity)

    def quantity_of(self, item_id: int) -> int:
        return self._items.quantity_of(item_id)

    @property
    def items(self) -> list[RoomItem]:
        return self._items.entries()

    @property
    def total_quantity(self) -> int:
        return self._items.total()
