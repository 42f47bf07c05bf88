"""Unit tests for the Stock aggregate."""

import pytest

from camarim.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientQuantityError,
    StockError,
    StockItemNotFoundError,
    ValidationError,
)
from camarim.domain.model.stock import Stock


class TestStockReceive:

    def test_receive_merges_quantities(self):
        stock = Stock()
        stock.receive(1, "Rope", 5)
        stock.receive(1, "Rope", 3)
        assert stock.quantity_of(1) == 8

    def test_receive_zero_for_new_item_is_noop(self):
        stock = Stock()
        stock.receive(1, "Rope", 0)
        assert stock.list_all() == []

    def test_receive_zero_for_existing_item_keeps_quantity(self):
        stock = Stock()
        stock.receive(1, "Rope", 4)
        stock.receive(1, "Rope", 0)
        assert stock.quantity_of(1) == 4

    def test_receive_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Stock().receive(1, "Rope", -1)


class TestStockIssue:

    def test_issue_reduces_quantity(self):
        stock = Stock()
        stock.receive(1, "X", 5)
        stock.issue(1, 2)
        assert stock.quantity_of(1) == 3

    def test_issue_more_than_on_hand_rejected(self):
        stock = Stock()
        stock.receive(1, "X", 5)
        with pytest.raises(InsufficientQuantityError) as exc_info:
            stock.issue(1, 6)
        assert exc_info.value.available == 5
        assert exc_info.value.requested == 6
        assert stock.quantity_of(1) == 5

    def test_issue_everything_removes_entry(self):
        stock = Stock()
        stock.receive(1, "X", 5)
        stock.issue(1, 5)
        assert stock.quantity_of(1) == 0
        assert stock.list_all() == []

    def test_issue_unknown_item_rejected(self):
        with pytest.raises(StockItemNotFoundError, match="not found in stock"):
            Stock().issue(42, 1)

    def test_errors_can_be_caught_broadly_or_narrowly(self):
        stock = Stock()
        stock.receive(1, "X", 1)
        with pytest.raises(StockError):
            stock.issue(1, 2)
        with pytest.raises(DomainException):
            stock.issue(1, 2)
        with pytest.raises(EntityNotFoundError):
            stock.issue(2, 1)


class TestStockQueries:

    def test_check_availability(self):
        stock = Stock()
        stock.receive(1, "X", 5)
        assert stock.check_availability(1, 5) is True
        assert stock.check_availability(1, 6) is False

    def test_check_availability_absent_item(self):
        assert Stock().check_availability(1, 0) is False

    def test_check_availability_has_no_side_effects(self):
        stock = Stock()
        stock.receive(1, "X", 5)
        stock.check_availability(1, 3)
        assert stock.quantity_of(1) == 5

    def test_list_all_is_ordered_snapshot(self):
        stock = Stock()
        stock.receive(3, "Towel", 1)
        stock.receive(1, "Rope", 2)
        entries = stock.list_all()
        assert [e.item_id for e in entries] == [1, 3]
        entries[0].quantity = 99
        assert stock.quantity_of(1) == 2


class TestStockSetQuantity:

    def test_set_quantity_overwrites(self):
        stock = Stock()
        stock.receive(1, "X", 5)
        stock.set_quantity(1, 20)
        assert stock.quantity_of(1) == 20

    def test_set_quantity_zero_evicts(self):
        stock = Stock()
        stock.receive(1, "X", 5)
        stock.set_quantity(1, 0)
        assert len(stock) == 0

    def test_set_quantity_requires_prior_receipt(self):
        with pytest.raises(StockItemNotFoundError):
            Stock().set_quantity(1, 3)

    def test_set_quantity_negative_rejected(self):
        stock = Stock()
        stock.receive(1, "X", 5)
        with pytest.raises(ValidationError):
            stock.set_quantity(1, -2)
        assert stock.quantity_of(1) == 5
