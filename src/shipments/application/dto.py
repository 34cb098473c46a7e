"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the store's internals to the outside world.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from shipments.domain.model.shipment import Shipment


@dataclass(frozen=True)
class ShipmentDTO:
    """Output: one shipment as displayed to the user."""

    position: int  # 1-based, as shown in listings
    category: int
    quantity: int
    expiry_date: str
    supplier_id: int

    @staticmethod
    def from_shipment(position: int, shipment: Shipment) -> ShipmentDTO:
        return ShipmentDTO(
            position=position,
            category=shipment.category,
            quantity=shipment.quantity,
            expiry_date=shipment.expiry_date,
            supplier_id=shipment.supplier_id,
        )


def to_dtos(shipments: Iterable[Shipment]) -> list[ShipmentDTO]:
    return [
        ShipmentDTO.from_shipment(position, shipment)
        for position, shipment in enumerate(shipments, start=1)
    ]
