"""Application service: receiving and issuing central stock.

Items enter stock by catalog id; the catalog supplies the name that the
stock ledger keeps a copy of.
"""

from __future__ import annotations

import logging

from camarim.application.catalog import Catalog
from camarim.domain.model.ledger import StockEntry
from camarim.domain.model.stock import Stock

logger = logging.getLogger(__name__)


class StockKeeping:

    def __init__(self, stock: Stock, catalog: Catalog) -> None:
        self._stock = stock
        self._catalog = catalog

    def receive(self, item_id: int, quantity: int) -> None:
        """Receive units of a catalog item into stock."""
        item = self._catalog.get(item_id)
        self._stock.receive(item.id, item.name, quantity)
        logger.info("Received %d x '%s' into stock", quantity, item.name)

    def issue(self, item_id: int, quantity: int) -> None:
        self._stock.issue(item_id, quantity)
        logger.info("Issued %d x item #%d from stock", quantity, item_id)

    def set_quantity(self, item_id: int, quantity: int) -> None:
        self._stock.set_quantity(item_id, quantity)
        logger.info("Set stock of item #%d to %d", item_id, quantity)

    def check_availability(self, item_id: int, quantity: int) -> bool:
        return self._stock.check_availability(item_id, quantity)

    def quantity_of(self, item_id: int) -> int:
        return self._stock.quantity_of(item_id)

    def list_all(self) -> list[StockEntry]:
        return self._stock.list_all()
