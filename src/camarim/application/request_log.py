"""Application service: supply requests raised by dressing rooms."""

from __future__ import annotations

import logging

from camarim.domain.exceptions import RequestItemNotFoundError, RequestNotFoundError
from camarim.domain.model.ledger import RequestItem
from camarim.domain.model.request import Request
from camarim.domain.repository.entity_registry import EntityRegistry

logger = logging.getLogger(__name__)


class RequestLog:

    def __init__(self, registry: EntityRegistry[Request] | None = None) -> None:
        self._registry = registry if registry is not None else EntityRegistry()

    def create(self, dressing_room_id: int, artist_name: str) -> int:
        request_id = self._registry.create(
            lambda new_id: Request.create(new_id, dressing_room_id, artist_name)
        )
        logger.info("Opened request #%d for dressing room #%d", request_id, dressing_room_id)
        return request_id

    def get(self, request_id: int) -> Request:
        request = self._registry.find_by_id(request_id)
        if request is None:
            raise RequestNotFoundError(f"Request with ID {request_id} not found")
        return request

    def find_by_id(self, request_id: int) -> Request | None:
        return self._registry.find_by_id(request_id)

    def find_by_dressing_room(self, dressing_room_id: int) -> list[Request]:
        return self._registry.list_all(
            where=lambda request: request.dressing_room_id == dressing_room_id
        )

    def list_pending(self) -> list[Request]:
        return self._registry.list_all(where=lambda request: not request.fulfilled)

    def list_all(self) -> list[Request]:
        return self._registry.list_all()

    def remove(self, request_id: int) -> None:
        if not self._registry.delete_by_id(request_id):
            raise RequestNotFoundError(f"Request with ID {request_id} not found")
        logger.info("Removed request #%d", request_id)

    # --- Lifecycle ------------------------------------------------------------

    def mark_fulfilled(self, request_id: int) -> None:
        self.get(request_id).mark_fulfilled()
        logger.info("Request #%d fulfilled", request_id)

    # --- Request items --------------------------------------------------------

    def add_item(self, request_id: int, item_id: int, item_name: str, quantity: int) -> None:
        self.get(request_id).add_item(item_id, item_name, quantity)
        logger.info("Added %d x '%s' to request #%d", quantity, item_name, request_id)

    def remove_item(self, request_id: int, item_id: int) -> None:
        if not self.get(request_id).remove_item(item_id):
            raise RequestItemNotFoundError(
                f"Item ID {item_id} not found in request #{request_id}"
            )
        logger.info("Removed item #%d from request #%d", item_id, request_id)

    def list_items(self, request_id: int) -> list[RequestItem]:
        return self.get(request_id).items
