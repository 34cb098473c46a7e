"""Application service: Search Shipments use case (query)."""

from __future__ import annotations

from shipments.domain.exceptions import ValidationError
from shipments.domain.model.store import ShipmentStore
from shipments.domain.service import query
from shipments.domain.service.query import QueryResult


class SearchShipmentsHandler:

    def handle(
        self,
        store: ShipmentStore,
        category: int | None = None,
        supplier_id: int | None = None,
        date_range: tuple[str, str] | None = None,
    ) -> QueryResult:
        """Filter the store by exactly one criterion."""
        given = [c for c in (category, supplier_id, date_range) if c is not None]
        if len(given) != 1:
            raise ValidationError(
                "Search needs exactly one of category, supplier or date range"
            )

        snapshot = store.snapshot()
        if category is not None:
            return query.by_category(snapshot, category)
        if supplier_id is not None:
            return query.by_supplier(snapshot, supplier_id)
        start, end = date_range  # type: ignore[misc]
        return query.by_date_range(snapshot, start.strip(), end.strip())
