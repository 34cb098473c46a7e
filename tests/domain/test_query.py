"""Unit tests for the shipment filters."""

import pytest

from shipments.domain.exceptions import RangeError, ValidationError
from shipments.domain.model.shipment import Shipment
from shipments.domain.service.query import by_category, by_date_range, by_supplier

SHIPMENTS = (
    Shipment(category=1, quantity=10, expiry_date="2023-12-31", supplier_id=7),
    Shipment(category=2, quantity=20, expiry_date="2024-01-15", supplier_id=8),
    Shipment(category=1, quantity=30, expiry_date="2024-02-01", supplier_id=7),
)


class TestByCategory:

    def test_matches_in_store_order(self):
        result = by_category(SHIPMENTS, 1)
        assert result.matches == (SHIPMENTS[0], SHIPMENTS[2])
        assert result.count == 2

    def test_no_matches(self):
        assert by_category(SHIPMENTS, 9).count == 0


class TestBySupplier:

    def test_exact_supplier(self):
        result = by_supplier(SHIPMENTS, 8)
        assert result.matches == (SHIPMENTS[1],)


class TestByDateRange:

    def test_january_only(self):
        result = by_date_range(SHIPMENTS, "2024-01-01", "2024-01-31")
        assert result.matches == (SHIPMENTS[1],)
        assert result.count == 1

    def test_bounds_are_inclusive(self):
        result = by_date_range(SHIPMENTS, "2023-12-31", "2024-02-01")
        assert result.count == 3

    def test_single_day_range(self):
        result = by_date_range(SHIPMENTS, "2024-02-01", "2024-02-01")
        assert result.matches == (SHIPMENTS[2],)

    def test_inverted_range_rejected(self):
        with pytest.raises(RangeError, match="after end date"):
            by_date_range(SHIPMENTS, "2024-02-01", "2024-01-01")

    def test_malformed_bound_rejected(self):
        with pytest.raises(ValidationError, match="Invalid start date"):
            by_date_range(SHIPMENTS, "2024-1-1", "2024-01-31")
