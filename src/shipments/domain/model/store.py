"""The growable, ordered collection of shipments.

Capacity is managed explicitly instead of leaning on the list's own
amortized growth, because the growth and shrink thresholds are part of
the store's observable behaviour:

- grow when full: double while capacity < 1024, otherwise add 50%
- after a delete: if capacity > 8 and count < capacity / 2, shrink to
  max(count, capacity // 2)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from shipments.domain.exceptions import RangeError, StoreCapacityError
from shipments.domain.model.shipment import Shipment

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_CAPACITY = 10
DOUBLING_LIMIT = 1024
SHRINK_FLOOR = 8


class ShipmentStore:
    """Ordered shipments held in a fixed number of slots.

    Invariants:
    - ``0 <= len(store) <= store.capacity``
    - slots ``[0, len(store))`` hold shipments, in insertion order unless
      the store was sorted
    - capacity only changes in ``append`` (grow) and ``delete_at`` (shrink)
    """

    def __init__(self, initial_capacity: int = DEFAULT_INITIAL_CAPACITY) -> None:
        self._slots: list[Shipment | None] = [None] * max(1, initial_capacity)
        self._count = 0

    # --- Accessors ------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def size(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Shipment]:
        for index in range(self._count):
            yield self._slots[index]  # type: ignore[misc]

    def get(self, index: int) -> Shipment:
        self._check_index(index)
        return self._slots[index]  # type: ignore[return-value]

    def snapshot(self) -> tuple[Shipment, ...]:
        """Return the live shipments as an immutable copy."""
        return tuple(self._slots[: self._count])  # type: ignore[arg-type]

    # --- Mutations ------------------------------------------------------------

    def clear(self) -> None:
        """Forget every shipment but keep the allocated slots for reuse."""
        for index in range(self._count):
            self._slots[index] = None
        self._count = 0

    def append(self, shipment: Shipment) -> None:
        """Add a shipment at the end, growing the slots when full.

        The caller is responsible for validating ``shipment``.
        """
        if self._count == self.capacity:
            self._grow()
        self._slots[self._count] = shipment
        self._count += 1

    def delete_at(self, index: int) -> Shipment:
        """Remove and return the shipment at ``index``, keeping order."""
        self._check_index(index)
        removed = self._slots[index]
        self._slots[index : self._count - 1] = self._slots[index + 1 : self._count]
        self._count -= 1
        self._slots[self._count] = None
        self._shrink_if_sparse()
        return removed  # type: ignore[return-value]

    def sort_by(self, key: Callable[[Shipment], Any], reverse: bool = False) -> None:
        """Reorder the live shipments in place."""
        if self._count <= 1:
            return
        live = self._slots[: self._count]
        live.sort(key=key, reverse=reverse)  # type: ignore[arg-type]
        self._slots[: self._count] = live

    # --- Capacity policy ------------------------------------------------------

    @staticmethod
    def next_capacity(capacity: int) -> int:
        if capacity < DOUBLING_LIMIT:
            return capacity * 2
        return capacity + capacity // 2

    def _grow(self) -> None:
        old_capacity = self.capacity
        new_capacity = self.next_capacity(old_capacity)
        try:
            extra: list[Shipment | None] = [None] * (new_capacity - old_capacity)
        except MemoryError as exc:
            raise StoreCapacityError(
                f"Cannot grow store from {old_capacity} to {new_capacity} slots"
            ) from exc
        self._slots.extend(extra)
        logger.debug("Store grown from %d to %d slots", old_capacity, new_capacity)

    def _shrink_if_sparse(self) -> None:
        old_capacity = self.capacity
        if old_capacity > SHRINK_FLOOR and self._count * 2 < old_capacity:
            new_capacity = max(self._count, old_capacity // 2)
            del self._slots[new_capacity:]
            logger.debug("Store shrunk from %d to %d slots", old_capacity, new_capacity)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise RangeError(
                f"Index {index} is out of range for a store of {self._count} shipments"
            )
