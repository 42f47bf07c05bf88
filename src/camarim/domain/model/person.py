"""People known to the venue.

``Person`` carries the shared id/name shape and the display contract;
``Artist`` is currently its only concrete kind.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from camarim.domain.model.validation import require_non_empty, require_non_negative_id


@dataclass
class Person(ABC):

    id: int
    name: str

    def rename(self, name: str) -> None:
        self.name = require_non_empty(name)

    @abstractmethod
    def display(self) -> str:
        """One-line human readable description."""

    def __str__(self) -> str:
        return self.display()


@dataclass
class Artist(Person):
    """A performer, optionally assigned to one dressing room (0 = none).

    ``dressing_room_id`` is a plain reference; keeping it in step with
    ``DressingRoom.artist_id`` is the job of the assignment service.
    """

    dressing_room_id: int = 0

    @staticmethod
    def create(artist_id: int, name: str, dressing_room_id: int = 0) -> Artist:
        require_non_negative_id(artist_id)
        return Artist(
            id=artist_id,
            name=require_non_empty(name, "Artist name"),
            dressing_room_id=require_non_negative_id(dressing_room_id, "Dressing room ID"),
        )

    def assign_room(self, dressing_room_id: int) -> None:
        self.dressing_room_id = require_non_negative_id(dressing_room_id, "Dressing room ID")

    def update(self, name: str, dressing_room_id: int) -> None:
        name = require_non_empty(name, "Artist name")
        require_non_negative_id(dressing_room_id, "Dressing room ID")
        self.name = name
        self.dressing_room_id = dressing_room_id

    @property
    def has_room(self) -> bool:
        return self.dressing_room_id != 0

    def display(self) -> str:
        return (
            f"Artista [ID: {self.id}, Nome: {self.name}, "
            f"Camarim ID: {self.dressing_room_id}]"
        )
