"""Domain service: Room Assignment.

``Artist.dressing_room_id`` and ``DressingRoom.artist_id`` are two
independent references. Registering or updating either record sets only
its own side. This service is the one place that keeps both sides in
step as a one-to-one optional link.

Same two-phase approach as elsewhere: load and check every record first,
then mutate, so a missing artist or room leaves both sides untouched.
"""

from __future__ import annotations

from camarim.domain.exceptions import ArtistNotFoundError, DressingRoomNotFoundError
from camarim.domain.model.dressing_room import DressingRoom
from camarim.domain.model.person import Artist
from camarim.domain.repository.entity_registry import EntityRegistry


class RoomAssignmentService:

    def __init__(
        self,
        artist_registry: EntityRegistry[Artist],
        room_registry: EntityRegistry[DressingRoom],
    ) -> None:
        self._artists = artist_registry
        self._rooms = room_registry

    def link(self, artist_id: int, room_id: int) -> None:
        """Assign *artist_id* to *room_id* on both sides.

        Any previous partner of the artist or of the room is released, so
        after the call the pair points at each other and nobody else points
        at either of them.
        """
        # Phase 1: load and validate
        artist = self._load_artist(artist_id)
        room = self._load_room(room_id)

        # Phase 2: release old partners, then link
        if artist.dressing_room_id not in (0, room.id):
            self._release_room_of(artist)
        if room.artist_id not in (0, artist.id):
            self._release_artist_of(room)

        artist.assign_room(room.id)
        room.assign_artist(artist.id)

    def unlink_artist(self, artist_id: int) -> None:
        """Clear the artist's room and, if it points back, the room's artist."""
        artist = self._load_artist(artist_id)
        self._release_room_of(artist)
        artist.assign_room(0)

    def unlink_room(self, room_id: int) -> None:
        """Clear the room's artist and, if it points back, the artist's room."""
        room = self._load_room(room_id)
        self._release_artist_of(room)
        room.assign_artist(0)

    # --- Internal helpers -----------------------------------------------------

    def _load_artist(self, artist_id: int) -> Artist:
        artist = self._artists.find_by_id(artist_id)
        if artist is None:
            raise ArtistNotFoundError(f"Artist with ID {artist_id} not found")
        return artist

    def _load_room(self, room_id: int) -> DressingRoom:
        room = self._rooms.find_by_id(room_id)
        if room is None:
            raise DressingRoomNotFoundError(f"Dressing room with ID {room_id} not found")
        return room

    def _release_room_of(self, artist: Artist) -> None:
        old_room = self._rooms.find_by_id(artist.dressing_room_id)
        if old_room is not None and old_room.artist_id == artist.id:
            old_room.assign_artist(0)

    def _release_artist_of(self, room: DressingRoom) -> None:
        old_artist = self._artists.find_by_id(room.artist_id)
        if old_artist is not None and old_artist.dressing_room_id == room.id:
            old_artist.assign_room(0)
