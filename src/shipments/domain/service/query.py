"""Read-only filters over a snapshot of shipments.

Every filter keeps the original store order of the matches.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from shipments.domain.exceptions import RangeError, ValidationError
from shipments.domain.model.shipment import Shipment
from shipments.domain.model.validation import date_problem


@dataclass(frozen=True)
class QueryResult:
    matches: tuple[Shipment, ...]

    @property
    def count(self) -> int:
        return len(self.matches)


def _select(
    shipments: Iterable[Shipment], predicate: Callable[[Shipment], bool]
) -> QueryResult:
    return QueryResult(matches=tuple(s for s in shipments if predicate(s)))


def by_category(shipments: Iterable[Shipment], category: int) -> QueryResult:
    return _select(shipments, lambda s: s.category == category)


def by_supplier(shipments: Iterable[Shipment], supplier_id: int) -> QueryResult:
    return _select(shipments, lambda s: s.supplier_id == supplier_id)


def by_date_range(shipments: Iterable[Shipment], start: str, end: str) -> QueryResult:
    """Shipments expiring between ``start`` and ``end``, both inclusive.

    Dates compare as strings: ``YYYY-MM-DD`` is fixed-width and
    zero-padded, so string order is calendar order.
    """
    for label, value in (("start", start), ("end", end)):
        problem = date_problem(value)
        if problem is not None:
            raise ValidationError(
                f"Invalid {label} date {value!r} ({problem}); expected YYYY-MM-DD"
            )
    if start > end:
        raise RangeError(f"Start date {start} is after end date {end}")
    return _select(shipments, lambda s: start <= s.expiry_date <= end)
