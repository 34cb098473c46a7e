"""Application service: Sort Shipments use case."""

from __future__ import annotations

from shipments.domain.exceptions import ValidationError
from shipments.domain.model.store import ShipmentStore
from shipments.domain.service.sorting import SortOrder, sort_shipments


class SortShipmentsHandler:

    def handle(self, store: ShipmentStore, order: SortOrder | str) -> SortOrder:
        """Reorder the store in memory. The data file is not touched."""
        if not isinstance(order, SortOrder):
            try:
                order = SortOrder(order.lower())
            except ValueError as exc:
                choices = ", ".join(o.value for o in SortOrder)
                raise ValidationError(
                    f"Unknown sort order {order!r} (choose from {choices})"
                ) from exc
        sort_shipments(store, order)
        return order
