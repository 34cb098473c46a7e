"""Per-invocation state shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

import click

from shipments.application.load_shipments import LoadShipmentsHandler
from shipments.domain.exceptions import DomainException
from shipments.domain.model.store import ShipmentStore
from shipments.infrastructure.bootstrap import new_store
from shipments.infrastructure.persistence.text_report_writer import TextReportWriter
from shipments.infrastructure.persistence.text_shipment_repository import (
    TextShipmentRepository,
)


@dataclass
class CliContext:
    shipment_repo: TextShipmentRepository
    report_writer: TextReportWriter

    def load_store(self, missing_ok: bool = False) -> ShipmentStore:
        """Build a store from the data file.

        With ``missing_ok`` an absent data file yields an empty store
        instead of an error.
        """
        store = new_store()
        if missing_ok and not self.shipment_repo.exists():
            return store
        try:
            result = LoadShipmentsHandler(self.shipment_repo).handle(store)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        for warning in result.warnings:
            click.echo(f"Skipped {warning}", err=True)
        return store


pass_context = click.make_pass_decorator(CliContext)
