"""Unit tests for the RoomAssignmentService domain service."""

import pytest

from camarim.domain.exceptions import ArtistNotFoundError, DressingRoomNotFoundError
from camarim.domain.model.dressing_room import DressingRoom
from camarim.domain.model.person import Artist
from camarim.domain.repository.entity_registry import EntityRegistry
from camarim.domain.service.room_assignment_service import RoomAssignmentService


def _setup():
    artists: EntityRegistry[Artist] = EntityRegistry()
    rooms: EntityRegistry[DressingRoom] = EntityRegistry()
    for name in ("Gal", "Elis"):
        artists.create(lambda i, name=name: Artist.create(i, name))
    for name in ("Camarim A", "Camarim B"):
        rooms.create(lambda i, name=name: DressingRoom.create(i, name))
    return RoomAssignmentService(artists, rooms), artists, rooms


class TestLink:

    def test_sets_both_sides(self):
        svc, artists, rooms = _setup()
        svc.link(artist_id=1, room_id=2)
        assert artists.find_by_id(1).dressing_room_id == 2
        assert rooms.find_by_id(2).artist_id == 1

    def test_moving_artist_releases_old_room(self):
        svc, artists, rooms = _setup()
        svc.link(1, 1)
        svc.link(1, 2)
        assert rooms.find_by_id(1).artist_id == 0
        assert rooms.find_by_id(2).artist_id == 1
        assert artists.find_by_id(1).dressing_room_id == 2

    def test_taking_occupied_room_releases_previous_artist(self):
        svc, artists, rooms = _setup()
        svc.link(1, 1)
        svc.link(2, 1)
        assert artists.find_by_id(1).dressing_room_id == 0
        assert artists.find_by_id(2).dressing_room_id == 1
        assert rooms.find_by_id(1).artist_id == 2

    def test_relinking_same_pair_is_stable(self):
        svc, artists, rooms = _setup()
        svc.link(1, 1)
        svc.link(1, 1)
        assert artists.find_by_id(1).dressing_room_id == 1
        assert rooms.find_by_id(1).artist_id == 1

    def test_unknown_room_changes_nothing(self):
        svc, artists, _ = _setup()
        with pytest.raises(DressingRoomNotFoundError):
            svc.link(1, 99)
        assert artists.find_by_id(1).dressing_room_id == 0

    def test_unknown_artist(self):
        svc, _, _ = _setup()
        with pytest.raises(ArtistNotFoundError):
            svc.link(99, 1)

    def test_does_not_clear_a_room_that_points_elsewhere(self):
        svc, artists, rooms = _setup()
        # Drifted data: artist 1 claims room 1 but room 1 names artist 2.
        artists.find_by_id(1).assign_room(1)
        rooms.find_by_id(1).assign_artist(2)
        svc.link(1, 2)
        assert rooms.find_by_id(1).artist_id == 2


class TestUnlink:

    def test_unlink_artist_clears_both_sides(self):
        svc, artists, rooms = _setup()
        svc.link(1, 2)
        svc.unlink_artist(1)
        assert artists.find_by_id(1).dressing_room_id == 0
        assert rooms.find_by_id(2).artist_id == 0

    def test_unlink_room_clears_both_sides(self):
        svc, artists, rooms = _setup()
        svc.link(2, 1)
        svc.unlink_room(1)
        assert rooms.find_by_id(1).artist_id == 0
        assert artists.find_by_id(2).dressing_room_id == 0
