"""Application service: Remove Shipment use case."""

from __future__ import annotations

from shipments.domain.exceptions import RangeError
from shipments.domain.model.shipment import Shipment
from shipments.domain.model.store import ShipmentStore


class RemoveShipmentHandler:

    def handle(self, store: ShipmentStore, position: int) -> Shipment:
        """Delete the shipment at 1-based ``position`` from memory.

        The data file is not touched; persist with SaveShipmentsHandler.
        """
        if not store:
            raise RangeError("There are no shipments to remove")
        if not 1 <= position <= len(store):
            raise RangeError(
                f"Position must be between 1 and {len(store)}, got {position}"
            )
        return store.delete_at(position - 1)
