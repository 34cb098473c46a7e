"""Application service: Add Shipment use case."""

from __future__ import annotations

from shipments.domain.model.shipment import Shipment
from shipments.domain.model.store import ShipmentStore
from shipments.domain.model.validation import validate_shipment
from shipments.domain.repository.shipment_repository import ShipmentRepository


class AddShipmentHandler:

    def __init__(self, shipment_repo: ShipmentRepository) -> None:
        self._shipment_repo = shipment_repo

    def handle(
        self,
        store: ShipmentStore,
        category: int,
        quantity: int,
        expiry_date: str,
        supplier_id: int,
    ) -> Shipment:
        """Validate a new shipment, append it to the data file, then to ``store``.

        The file is written first: if that fails the StorageError
        propagates and the store is left as it was.
        """
        shipment = validate_shipment(category, quantity, expiry_date.strip(), supplier_id)
        self._shipment_repo.append_one(shipment)
        store.append(shipment)
        return shipment
