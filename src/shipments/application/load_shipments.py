"""Application service: Load Shipments use case."""

from __future__ import annotations

from shipments.domain.model.store import ShipmentStore
from shipments.domain.repository.shipment_repository import (
    LoadResult,
    ShipmentRepository,
)


class LoadShipmentsHandler:

    def __init__(self, shipment_repo: ShipmentRepository) -> None:
        self._shipment_repo = shipment_repo

    def handle(self, store: ShipmentStore, replace: bool = True) -> LoadResult:
        """Read the data file into ``store``.

        By default the store's previous contents are replaced. If the file
        cannot be read, StorageError propagates and the store is untouched.
        """
        return self._shipment_repo.load_into(store, replace=replace)
