"""Table output shared by the one-shot commands and the menu."""

from __future__ import annotations

import click

from shipments.application.dto import ShipmentDTO
from shipments.domain.service.report import InventoryReport


def echo_shipments(rows: list[ShipmentDTO], numbered: bool = False) -> None:
    if not rows:
        click.echo("No shipments loaded.")
        return

    prefix = f"{'#':<6}" if numbered else ""
    click.echo(f"{prefix}{'Category':<10} {'Quantity':>10} {'Expiry':>12} {'Supplier':>10}")
    click.echo("-" * (len(prefix) + 45))
    for row in rows:
        prefix = f"[{row.position:<3}] " if numbered else ""
        click.echo(
            f"{prefix}{row.category:<10} {row.quantity:>10} "
            f"{row.expiry_date:>12} {row.supplier_id:>10}"
        )


def echo_report_summary(report: InventoryReport, destination: str) -> None:
    top = ", ".join(str(c) for c in report.top_categories)
    click.echo(f"Report generated: '{destination}'")
    click.echo(f"Total quantity: {report.total_quantity}  (top categories: {top})")
