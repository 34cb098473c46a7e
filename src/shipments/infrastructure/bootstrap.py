"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from shipments.domain.model.store import ShipmentStore
from shipments.infrastructure.config import get_settings
from shipments.infrastructure.persistence.text_report_writer import TextReportWriter
from shipments.infrastructure.persistence.text_shipment_repository import (
    TextShipmentRepository,
)


def shipment_repository(data_file: Path | None = None) -> TextShipmentRepository:
    return TextShipmentRepository(data_file or get_settings().data_file)


def report_writer(report_file: Path | None = None) -> TextReportWriter:
    return TextReportWriter(report_file or get_settings().report_file)


def new_store() -> ShipmentStore:
    return ShipmentStore(initial_capacity=get_settings().initial_capacity)
