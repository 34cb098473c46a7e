"""Application service: Save Shipments use case."""

from __future__ import annotations

from shipments.domain.model.store import ShipmentStore
from shipments.domain.repository.shipment_repository import ShipmentRepository


class SaveShipmentsHandler:

    def __init__(self, shipment_repo: ShipmentRepository) -> None:
        self._shipment_repo = shipment_repo

    def handle(self, store: ShipmentStore) -> int:
        """Overwrite the data file with the store, keeping its current order."""
        return self._shipment_repo.save_all(store)
