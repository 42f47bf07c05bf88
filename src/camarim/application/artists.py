"""Application service: the artist directory.

Artists may share names. An artist's dressing room id is stored as given
(0 = none); it is not checked against the room directory. When wired to a
RoomAssignmentService, removing an artist releases the room that points
back at it.
"""

from __future__ import annotations

import logging

from camarim.domain.exceptions import ArtistNotFoundError
from camarim.domain.model.person import Artist
from camarim.domain.repository.entity_registry import EntityRegistry
from camarim.domain.service.room_assignment_service import RoomAssignmentService

logger = logging.getLogger(__name__)


class ArtistDirectory:

    def __init__(
        self,
        registry: EntityRegistry[Artist] | None = None,
        assignments: RoomAssignmentService | None = None,
    ) -> None:
        self._registry = registry if registry is not None else EntityRegistry()
        self._assignments = assignments

    def register(self, name: str, dressing_room_id: int = 0) -> int:
        artist_id = self._registry.create(
            lambda new_id: Artist.create(new_id, name, dressing_room_id)
        )
        logger.info("Registered artist #%d", artist_id)
        return artist_id

    def get(self, artist_id: int) -> Artist:
        artist = self._registry.find_by_id(artist_id)
        if artist is None:
            raise ArtistNotFoundError(f"Artist with ID {artist_id} not found")
        return artist

    def find_by_id(self, artist_id: int) -> Artist | None:
        return self._registry.find_by_id(artist_id)

    def find_by_dressing_room(self, dressing_room_id: int) -> list[Artist]:
        return self._registry.list_all(
            where=lambda artist: artist.dressing_room_id == dressing_room_id
        )

    def update(self, artist_id: int, name: str, dressing_room_id: int) -> None:
        self.get(artist_id).update(name, dressing_room_id)
        logger.info("Updated artist #%d", artist_id)

    def remove(self, artist_id: int) -> None:
        self.get(artist_id)
        if self._assignments is not None:
            self._assignments.unlink_artist(artist_id)
        self._registry.delete_by_id(artist_id)
        logger.info("Removed artist #%d", artist_id)

    def list_all(self) -> list[Artist]:
        return self._registry.list_all()
