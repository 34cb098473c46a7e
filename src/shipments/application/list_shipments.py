"""Application service: List Shipments use case (query)."""

from __future__ import annotations

from shipments.application.dto import ShipmentDTO, to_dtos
from shipments.domain.model.store import ShipmentStore


class ListShipmentsHandler:

    def handle(self, store: ShipmentStore) -> list[ShipmentDTO]:
        return to_dtos(store)
