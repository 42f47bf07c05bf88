"""Unit tests for the DressingRoom aggregate."""

import pytest

from camarim.domain.exceptions import (
    InsufficientQuantityError,
    RoomItemNotFoundError,
    ValidationError,
)
from camarim.domain.model.dressing_room import DressingRoom


def _room() -> DressingRoom:
    return DressingRoom.create(1, "Camarim A")


class TestDressingRoomCreation:

    def test_happy_path(self):
        room = DressingRoom.create(1, "Camarim A", 4)
        assert room.name == "Camarim A"
        assert room.artist_id == 4
        assert room.items == []

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="Dressing room name cannot be empty"):
            DressingRoom.create(1, "")

    def test_update_is_all_or_nothing(self):
        room = DressingRoom.create(1, "Camarim A", 4)
        with pytest.raises(ValidationError):
            room.update("", 5)
        assert room.name == "Camarim A"
        assert room.artist_id == 4


class TestDressingRoomItems:

    def test_add_merges(self):
        room = _room()
        room.add_item(1, "Cable", 4)
        room.add_item(1, "Cable", 1)
        assert room.quantity_of(1) == 5
        assert room.total_quantity == 5

    def test_add_zero_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _room().add_item(1, "Cable", 0)

    def test_removing_everything_evicts_item(self):
        room = _room()
        room.add_item(1, "Cable", 4)
        room.remove_item(1, 4)
        assert all(item.item_id != 1 for item in room.items)

    def test_remove_unknown_item(self):
        with pytest.raises(RoomItemNotFoundError, match="dressing room #1"):
            _room().remove_item(9, 1)

    def test_remove_more_than_held(self):
        room = _room()
        room.add_item(1, "Cable", 2)
        with pytest.raises(InsufficientQuantityError):
            room.remove_item(1, 3)
        assert room.quantity_of(1) == 2

    def test_total_quantity_sums_all_items(self):
        room = _room()
        room.add_item(1, "Cable", 2)
        room.add_item(2, "Towel", 3)
        assert room.total_quantity == 5
