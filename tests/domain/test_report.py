"""Unit tests for report aggregation and rendering."""

import pytest

from shipments.domain.model.shipment import Shipment
from shipments.domain.service.report import (
    build_report,
    category_totals,
    render_report,
    top_categories,
)


def _shipment(category: int, quantity: int, supplier: int) -> Shipment:
    return Shipment(category=category, quantity=quantity, expiry_date="2024-05-01", supplier_id=supplier)


class TestCategoryTotals:

    def test_totals_for_all_ten_categories(self):
        totals = category_totals([_shipment(1, 10, 1), _shipment(1, 20, 2), _shipment(2, 30, 3)])
        assert totals == {0: 0, 1: 30, 2: 30, 3: 0, 4: 0, 5: 0, 6: 0, 7: 0, 8: 0, 9: 0}


class TestTopCategories:

    def test_ties_go_to_lower_category(self):
        totals = {c: 0 for c in range(10)}
        totals.update({1: 30, 2: 30, 5: 50})
        assert top_categories(totals) == (5, 1, 2)

    def test_stops_at_three(self):
        totals = {c: c * 10 for c in range(10)}
        assert top_categories(totals) == (9, 8, 7)

    def test_stops_when_no_positive_total_left(self):
        totals = {c: 0 for c in range(10)}
        totals[4] = 12
        assert top_categories(totals) == (4,)

    def test_input_not_modified(self):
        totals = {c: 1 for c in range(10)}
        top_categories(totals)
        assert totals == {c: 1 for c in range(10)}


class TestBuildReport:

    def test_empty_input_reports_nothing(self):
        assert build_report([]) is None

    def test_figures(self):
        report = build_report([_shipment(1, 10, 100), _shipment(1, 20, 200), _shipment(2, 30, 300)])

        assert report.category_totals[1] == 30
        assert report.category_totals[2] == 30
        assert report.total_quantity == 60
        assert report.top_categories == (1, 2)
        assert sum(report.supplier_shares.values()) == pytest.approx(100.0)

    def test_large_supplier_ids_are_counted(self):
        report = build_report([_shipment(0, 25, 5000), _shipment(0, 75, -3)])
        assert report.supplier_shares == {5000: 25.0, -3: 75.0}


class TestRenderReport:

    def test_sections(self):
        report = build_report([_shipment(1, 10, 7), _shipment(1, 20, 2), _shipment(2, 30, 7)])
        text = render_report(report)
        lines = text.splitlines()

        assert "SHIPMENT INVENTORY REPORT" in text
        assert sum(1 for line in lines if line.startswith("Category ")) == 10
        assert "Category 1: 30" in lines
        assert "Category 9: 0" in lines
        assert "Top 3 categories: 1, 2" in lines
        assert lines.index("Supplier 2: 33.3%") < lines.index("Supplier 7: 66.7%")
        assert text.endswith("\n")
