"""A shipment: one perishable inventory entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Shipment:
    """A single shipment record.

    Instances are built through ``validation.validate_shipment`` (or the
    codec, which uses it) so that only valid values reach a store.
    """

    category: int
    quantity: int
    expiry_date: str  # YYYY-MM-DD
    supplier_id: int

    def __str__(self) -> str:
        return (
            f"category={self.category} quantity={self.quantity} "
            f"expiry={self.expiry_date} supplier={self.supplier_id}"
        )
