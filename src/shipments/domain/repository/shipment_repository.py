"""Abstract repository for the shipment data file."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shipments.domain.model.shipment import Shipment
from shipments.domain.model.store import ShipmentStore


@dataclass(frozen=True)
class LoadWarning:
    """A data line that was skipped during a load."""

    line_number: int  # 1-based
    reason: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.reason}"


@dataclass(frozen=True)
class LoadResult:
    loaded: int
    warnings: tuple[LoadWarning, ...] = ()

    @property
    def skipped(self) -> int:
        return len(self.warnings)


class ShipmentRepository(ABC):

    @abstractmethod
    def exists(self) -> bool:
        """Return True if the underlying data source is present."""

    @abstractmethod
    def load_into(self, store: ShipmentStore, replace: bool = False) -> LoadResult:
        """Append every valid stored shipment to ``store``.

        With ``replace`` the store is cleared first, but only once the data
        source has been read successfully. Bad lines are skipped and
        reported as warnings; they never abort the load.
        """

    @abstractmethod
    def append_one(self, shipment: Shipment) -> None:
        """Add a single shipment to the end of the data source."""

    @abstractmethod
    def save_all(self, store: ShipmentStore) -> int:
        """Overwrite the data source with the store's shipments, in order."""
