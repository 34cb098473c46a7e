"""Tests for the in-memory RemoveShipment, SearchShipments and SortShipments use cases."""

import pytest

from shipments.application.remove_shipment import RemoveShipmentHandler
from shipments.application.search_shipments import SearchShipmentsHandler
from shipments.application.sort_shipments import SortShipmentsHandler
from shipments.domain.exceptions import RangeError, ValidationError
from shipments.domain.model.shipment import Shipment
from shipments.domain.model.store import ShipmentStore
from shipments.domain.service.sorting import SortOrder


def _store() -> ShipmentStore:
    store = ShipmentStore()
    for shipment in (
        Shipment(3, 10, "2023-12-31", 1),
        Shipment(1, 30, "2024-01-15", 2),
        Shipment(3, 20, "2024-02-01", 1),
    ):
        store.append(shipment)
    return store


class TestRemoveShipment:

    def test_position_is_one_based(self):
        store = _store()
        removed = RemoveShipmentHandler().handle(store, 1)
        assert removed.quantity == 10
        assert [s.quantity for s in store] == [30, 20]

    @pytest.mark.parametrize("position", [0, 4, -2])
    def test_out_of_range_rejected(self, position):
        store = _store()
        with pytest.raises(RangeError, match="between 1 and 3"):
            RemoveShipmentHandler().handle(store, position)
        assert len(store) == 3

    def test_empty_store_rejected(self):
        with pytest.raises(RangeError, match="no shipments"):
            RemoveShipmentHandler().handle(ShipmentStore(), 1)


class TestSearchShipments:

    def test_by_category(self):
        result = SearchShipmentsHandler().handle(_store(), category=3)
        assert [s.quantity for s in result.matches] == [10, 20]

    def test_by_supplier(self):
        result = SearchShipmentsHandler().handle(_store(), supplier_id=2)
        assert result.count == 1

    def test_by_date_range(self):
        result = SearchShipmentsHandler().handle(_store(), date_range=("2024-01-01", "2024-01-31"))
        assert [s.expiry_date for s in result.matches] == ["2024-01-15"]

    def test_category_zero_is_a_criterion(self):
        result = SearchShipmentsHandler().handle(_store(), category=0)
        assert result.count == 0

    def test_requires_exactly_one_criterion(self):
        with pytest.raises(ValidationError, match="exactly one"):
            SearchShipmentsHandler().handle(_store())
        with pytest.raises(ValidationError, match="exactly one"):
            SearchShipmentsHandler().handle(_store(), category=1, supplier_id=2)

    def test_search_does_not_modify_store(self):
        store = _store()
        before = store.snapshot()
        SearchShipmentsHandler().handle(store, supplier_id=1)
        assert store.snapshot() == before


class TestSortShipments:

    def test_accepts_order_name(self):
        store = _store()
        assert SortShipmentsHandler().handle(store, "Quantity") is SortOrder.QUANTITY
        assert [s.quantity for s in store] == [30, 20, 10]

    def test_unknown_order_rejected(self):
        with pytest.raises(ValidationError, match="Unknown sort order"):
            SortShipmentsHandler().handle(_store(), "supplier")
