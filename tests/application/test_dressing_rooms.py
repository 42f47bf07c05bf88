"""Integration tests for the DressingRoomDirectory application service."""

import pytest

from camarim.application.artists import ArtistDirectory
from camarim.application.dressing_rooms import DressingRoomDirectory
from camarim.domain.exceptions import (
    DressingRoomNotFoundError,
    InsufficientQuantityError,
    RoomItemNotFoundError,
)
from camarim.domain.repository.entity_registry import EntityRegistry
from camarim.domain.service.room_assignment_service import RoomAssignmentService


def _setup() -> tuple[DressingRoomDirectory, int]:
    rooms = DressingRoomDirectory()
    return rooms, rooms.register("Camarim A")


class TestDressingRoomItems:

    def test_remove_everything_evicts(self):
        rooms, r = _setup()
        rooms.add_item(r, 1, "Cable", 4)
        rooms.remove_item(r, 1, 4)
        assert all(item.item_id != 1 for item in rooms.list_items(r))

    def test_item_missing_in_this_room(self):
        rooms, r = _setup()
        other = rooms.register("Camarim B")
        rooms.add_item(other, 1, "Cable", 4)
        with pytest.raises(RoomItemNotFoundError):
            rooms.remove_item(r, 1, 1)

    def test_insufficient(self):
        rooms, r = _setup()
        rooms.add_item(r, 1, "Cable", 1)
        with pytest.raises(InsufficientQuantityError):
            rooms.remove_item(r, 1, 2)

    def test_unknown_room(self):
        rooms, _ = _setup()
        with pytest.raises(DressingRoomNotFoundError):
            rooms.add_item(99, 1, "Cable", 1)


class TestDressingRoomDirectory:

    def test_find_by_artist_returns_first_match(self):
        rooms = DressingRoomDirectory()
        rooms.register("A", 5)
        rooms.register("B", 5)
        assert rooms.find_by_artist(5).name == "A"
        assert rooms.find_by_artist(6) is None

    def test_update(self):
        rooms, r = _setup()
        rooms.update(r, "Camarim Principal", 3)
        room = rooms.get(r)
        assert (room.name, room.artist_id) == ("Camarim Principal", 3)

    def test_items_die_with_room(self):
        rooms, r = _setup()
        rooms.add_item(r, 1, "Cable", 4)
        rooms.remove(r)
        with pytest.raises(DressingRoomNotFoundError):
            rooms.list_items(r)

    def test_list_all_is_snapshot(self):
        rooms, r = _setup()
        rooms.add_item(r, 1, "Cable", 4)
        snapshot = rooms.list_all()[0]
        snapshot.add_item(1, "Cable", 10)
        assert rooms.get(r).quantity_of(1) == 4


class TestRoomRemovalWithAssignments:

    def test_removing_room_releases_its_artist(self):
        artist_registry = EntityRegistry()
        room_registry = EntityRegistry()
        assignments = RoomAssignmentService(artist_registry, room_registry)
        artists = ArtistDirectory(artist_registry, assignments)
        rooms = DressingRoomDirectory(room_registry, assignments)
        artist_id = artists.register("Elis")
        room_id = rooms.register("Camarim B")
        assignments.link(artist_id, room_id)

        rooms.remove(room_id)

        assert artists.get(artist_id).dressing_room_id == 0
        assert artists.find_by_dressing_room(room_id) == []
