"""Application service: the dressing room (camarim) directory.

When wired to a RoomAssignmentService, removing a room releases the artist
that points back at it.
"""

from __future__ import annotations

import logging

from camarim.domain.exceptions import DressingRoomNotFoundError
from camarim.domain.model.dressing_room import DressingRoom
from camarim.domain.model.ledger import RoomItem
from camarim.domain.repository.entity_registry import EntityRegistry
from camarim.domain.service.room_assignment_service import RoomAssignmentService

logger = logging.getLogger(__name__)


class DressingRoomDirectory:

    def __init__(
        self,
        registry: EntityRegistry[DressingRoom] | None = None,
        assignments: RoomAssignmentService | None = None,
    ) -> None:
        self._registry = registry if registry is not None else EntityRegistry()
        self._assignments = assignments

    def register(self, name: str, artist_id: int = 0) -> int:
        room_id = self._registry.create(
            lambda new_id: DressingRoom.create(new_id, name, artist_id)
        )
        logger.info("Registered dressing room #%d", room_id)
        return room_id

    def get(self, room_id: int) -> DressingRoom:
        room = self._registry.find_by_id(room_id)
        if room is None:
            raise DressingRoomNotFoundError(f"Dressing room with ID {room_id} not found")
        return room

    def find_by_id(self, room_id: int) -> DressingRoom | None:
        return self._registry.find_by_id(room_id)

    def find_by_artist(self, artist_id: int) -> DressingRoom | None:
        """First room (in registration order) assigned to the artist."""
        matches = self._registry.find_by(lambda room: room.artist_id == artist_id)
        return matches[0] if matches else None

    def update(self, room_id: int, name: str, artist_id: int) -> None:
        self.get(room_id).update(name, artist_id)
        logger.info("Updated dressing room #%d", room_id)

    def remove(self, room_id: int) -> None:
        self.get(room_id)
        if self._assignments is not None:
            self._assignments.unlink_room(room_id)
        self._registry.delete_by_id(room_id)
        logger.info("Removed dressing room #%d", room_id)

    def list_all(self) -> list[DressingRoom]:
        return self._registry.list_all()

    # --- Room items -----------------------------------------------------------

    def add_item(self, room_id: int, item_id: int, item_name: str, quantity: int) -> None:
        self.get(room_id).add_item(item_id, item_name, quantity)
        logger.info("Added %d x '%s' to dressing room #%d", quantity, item_name, room_id)

    def remove_item(self, room_id: int, item_id: int, quantity: int) -> None:
        self.get(room_id).remove_item(item_id, quantity)
        logger.info("Removed %d x item #%d from dressing room #%d", quantity, item_id, room_id)

    def list_items(self, room_id: int) -> list[RoomItem]:
        return self.get(room_id).items
