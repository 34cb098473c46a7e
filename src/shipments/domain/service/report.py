"""Aggregate statistics over shipments and their text rendering.

Three figures are reported:

1. total quantity per category, for all ten categories
2. up to three categories with the highest totals
3. each supplier's share of the overall quantity, as a percentage

Supplier totals are kept in a dict keyed by supplier id, so any integer
id is accounted for.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from shipments.domain.model.shipment import Shipment
from shipments.domain.model.validation import MAX_CATEGORY, MIN_CATEGORY

TOP_CATEGORY_LIMIT = 3

_RULE = "=" * 40


@dataclass(frozen=True)
class InventoryReport:
    category_totals: dict[int, int]
    top_categories: tuple[int, ...]
    supplier_totals: dict[int, int]
    total_quantity: int

    @property
    def supplier_shares(self) -> dict[int, float]:
        """Percentage of the total quantity per supplier."""
        return {
            supplier_id: quantity * 100.0 / self.total_quantity
            for supplier_id, quantity in self.supplier_totals.items()
        }


def category_totals(shipments: Iterable[Shipment]) -> dict[int, int]:
    totals = {category: 0 for category in range(MIN_CATEGORY, MAX_CATEGORY + 1)}
    for shipment in shipments:
        totals[shipment.category] += shipment.quantity
    return totals


def top_categories(
    totals: dict[int, int], limit: int = TOP_CATEGORY_LIMIT
) -> tuple[int, ...]:
    """Pick the categories with the highest totals.

    Each round scans categories in ascending order and only takes over
    the running maximum on a strictly greater total, so ties go to the
    lower category. Stops after ``limit`` picks or once no category with
    a positive total is left.
    """
    remaining = dict(totals)
    picked: list[int] = []
    while len(picked) < limit:
        best_category, best_total = None, 0
        for category in sorted(remaining):
            if remaining[category] > best_total:
                best_category, best_total = category, remaining[category]
        if best_category is None:
            break
        picked.append(best_category)
        del remaining[best_category]
    return tuple(picked)


def supplier_totals(shipments: Iterable[Shipment]) -> dict[int, int]:
    totals: dict[int, int] = {}
    for shipment in shipments:
        totals[shipment.supplier_id] = totals.get(shipment.supplier_id, 0) + shipment.quantity
    return totals


def build_report(shipments: Iterable[Shipment]) -> InventoryReport | None:
    """Compute the report figures, or None when there is nothing to report."""
    shipments = list(shipments)
    if not shipments:
        return None
    per_category = category_totals(shipments)
    return InventoryReport(
        category_totals=per_category,
        top_categories=top_categories(per_category),
        supplier_totals=supplier_totals(shipments),
        total_quantity=sum(s.quantity for s in shipments),
    )


def render_report(report: InventoryReport) -> str:
    lines = [
        _RULE,
        "   SHIPMENT INVENTORY REPORT",
        _RULE,
        "",
        "Total stock by category:",
    ]
    for category, total in sorted(report.category_totals.items()):
        lines.append(f"Category {category}: {total}")

    lines.append("")
    top = ", ".join(str(category) for category in report.top_categories)
    lines.append(f"Top {TOP_CATEGORY_LIMIT} categories: {top}")

    lines.append("")
    lines.append("Supplier statistics:")
    shares = report.supplier_shares
    for supplier_id in sorted(shares):
        if report.supplier_totals[supplier_id] > 0:
            lines.append(f"Supplier {supplier_id}: {shares[supplier_id]:.1f}%")

    lines.append("")
    lines.append(_RULE)
    return "\n".join(lines) + "\n"
