"""Composition root: wires the registries, aggregates and services together.

This is the only place in the codebase that knows about *all* layers.
Everything is in memory, so each call builds a fresh, empty system.
"""

from __future__ import annotations

from dataclasses import dataclass

from camarim.application.artists import ArtistDirectory
from camarim.application.catalog import Catalog
from camarim.application.dressing_rooms import DressingRoomDirectory
from camarim.application.request_log import RequestLog
from camarim.application.shopping_lists import ShoppingListDirectory
from camarim.application.stock_keeping import StockKeeping
from camarim.domain.model.dressing_room import DressingRoom
from camarim.domain.model.person import Artist
from camarim.domain.model.stock import Stock
from camarim.domain.repository.entity_registry import EntityRegistry
from camarim.domain.service.room_assignment_service import RoomAssignmentService


@dataclass(frozen=True)
class AppContext:
    """The single instance of every directory, handed to the CLI."""

    catalog: Catalog
    stock: StockKeeping
    artists: ArtistDirectory
    dressing_rooms: DressingRoomDirectory
    requests: RequestLog
    shopping_lists: ShoppingListDirectory
    assignments: RoomAssignmentService


def build_context() -> AppContext:
    artist_registry: EntityRegistry[Artist] = EntityRegistry()
    room_registry: EntityRegistry[DressingRoom] = EntityRegistry()
    catalog = Catalog()
    assignments = RoomAssignmentService(artist_registry, room_registry)

    return AppContext(
        catalog=catalog,
        stock=StockKeeping(Stock(), catalog),
        artists=ArtistDirectory(artist_registry, assignments),
        dressing_rooms=DressingRoomDirectory(room_registry, assignments),
        requests=RequestLog(),
        shopping_lists=ShoppingListDirectory(),
        assignments=assignments,
    )
