"""Application service: Generate Report use case."""

from __future__ import annotations

from shipments.domain.model.store import ShipmentStore
from shipments.domain.repository.report_writer import ReportWriter
from shipments.domain.service.report import InventoryReport, build_report, render_report


class GenerateReportHandler:

    def __init__(self, report_writer: ReportWriter) -> None:
        self._report_writer = report_writer

    def handle(self, store: ShipmentStore) -> InventoryReport | None:
        """Compute and write the inventory report.

        Returns None, without writing anything, when the store is empty.
        """
        report = build_report(store.snapshot())
        if report is None:
            return None
        self._report_writer.write(render_report(report))
        return report
