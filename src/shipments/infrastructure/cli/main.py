from __future__ import annotations

from pathlib import Path

import click

from shipments.infrastructure.bootstrap import report_writer, shipment_repository
from shipments.infrastructure.cli.context import CliContext
from shipments.infrastructure.cli.menu import menu
from shipments.infrastructure.cli.shipment_commands import (
    shipment_add,
    shipment_list,
    shipment_remove,
    shipment_report,
    shipment_search,
    shipment_sort,
)
from shipments.infrastructure.config import get_settings
from shipments.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Shipment data file (default: shipments.txt or $SHIPMENTS_DATA_FILE).",
)
@click.option(
    "--report-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Report file (default: report.txt or $SHIPMENTS_REPORT_FILE).",
)
@click.option("--log-level", default=None, help="Logging level, e.g. INFO or DEBUG.")
@click.option("--json-logs", is_flag=True, default=False, help="Emit logs as JSON.")
@click.pass_context
def cli(
    ctx: click.Context,
    data_file: Path | None,
    report_file: Path | None,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """Shipment Catalog: perishable inventory records"""
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        json_logs=json_logs or settings.json_logs,
    )
    ctx.obj = CliContext(
        shipment_repo=shipment_repository(data_file),
        report_writer=report_writer(report_file),
    )


# Register subcommands
cli.add_command(menu)
cli.add_command(shipment_add)
cli.add_command(shipment_list)
cli.add_command(shipment_remove)
cli.add_command(shipment_report)
cli.add_command(shipment_search)
cli.add_command(shipment_sort)
