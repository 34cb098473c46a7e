"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the text-file
implementations but keep everything in a list. No file I/O, no side effects.
"""

from __future__ import annotations

from shipments.domain.exceptions import StorageError
from shipments.domain.model.shipment import Shipment
from shipments.domain.model.store import ShipmentStore
from shipments.domain.repository.report_writer import ReportWriter
from shipments.domain.repository.shipment_repository import (
    LoadResult,
    ShipmentRepository,
)


class FakeShipmentRepository(ShipmentRepository):

    def __init__(self, shipments: list[Shipment] | None = None) -> None:
        self.saved: list[Shipment] | None = list(shipments) if shipments is not None else None

    def exists(self) -> bool:
        return self.saved is not None

    def load_into(self, store: ShipmentStore, replace: bool = False) -> LoadResult:
        if self.saved is None:
            raise StorageError("Could not open file 'fake'")
        if replace:
            store.clear()
        for shipment in self.saved:
            store.append(shipment)
        return LoadResult(loaded=len(self.saved))

    def append_one(self, shipment: Shipment) -> None:
        if self.saved is None:
            self.saved = []
        self.saved.append(shipment)

    def save_all(self, store: ShipmentStore) -> int:
        self.saved = list(store)
        return len(self.saved)


class FailingShipmentRepository(FakeShipmentRepository):
    """Every write fails, as if the disk were full or read-only."""

    def append_one(self, shipment: Shipment) -> None:
        raise StorageError("Cannot append to 'fake': disk full")

    def save_all(self, store: ShipmentStore) -> int:
        raise StorageError("Cannot save to 'fake': disk full")


class FakeReportWriter(ReportWriter):

    def __init__(self) -> None:
        self.written: list[str] = []

    def write(self, text: str) -> None:
        self.written.append(text)
