"""In-place reordering of a store by one of three orders.

None of the orders defines a secondary key. Shipments with equal keys
end up in whatever order ``list.sort`` leaves them; callers must not
depend on that.
"""

from __future__ import annotations

from enum import Enum

from shipments.domain.model.store import ShipmentStore


class SortOrder(Enum):
    QUANTITY = "quantity"  # largest first
    CATEGORY = "category"  # 0 to 9
    DATE = "date"  # earliest first


_KEYS = {
    SortOrder.QUANTITY: (lambda s: s.quantity, True),
    SortOrder.CATEGORY: (lambda s: s.category, False),
    SortOrder.DATE: (lambda s: s.expiry_date, False),
}


def sort_shipments(store: ShipmentStore, order: SortOrder) -> ShipmentStore:
    """Sort ``store`` in place and return it. No-op for fewer than two shipments."""
    key, reverse = _KEYS[order]
    store.sort_by(key, reverse=reverse)
    return store
