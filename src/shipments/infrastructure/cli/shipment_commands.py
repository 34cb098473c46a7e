"""CLI commands that run one operation against the data file and exit."""

from __future__ import annotations

from pathlib import Path

import click

from shipments.application.add_shipment import AddShipmentHandler
from shipments.application.dto import to_dtos
from shipments.application.generate_report import GenerateReportHandler
from shipments.application.list_shipments import ListShipmentsHandler
from shipments.application.remove_shipment import RemoveShipmentHandler
from shipments.application.save_shipments import SaveShipmentsHandler
from shipments.application.search_shipments import SearchShipmentsHandler
from shipments.application.sort_shipments import SortShipmentsHandler
from shipments.domain.exceptions import DomainException
from shipments.domain.service.query import QueryResult
from shipments.domain.service.sorting import SortOrder
from shipments.infrastructure.bootstrap import report_writer
from shipments.infrastructure.cli.context import CliContext, pass_context
from shipments.infrastructure.cli.formatting import echo_report_summary, echo_shipments


@click.command("list")
@pass_context
def shipment_list(ctx: CliContext) -> None:
    """List every shipment in the data file."""
    store = ctx.load_store()
    rows = ListShipmentsHandler().handle(store)
    echo_shipments(rows, numbered=True)
    if rows:
        click.echo(f"{len(rows)} shipments.")


@click.command("add")
@click.option("--category", required=True, type=int, help="Category code (0-9).")
@click.option("--quantity", required=True, type=int, help="Quantity (positive).")
@click.option("--expiry", required=True, help="Expiry date (YYYY-MM-DD).")
@click.option("--supplier", required=True, type=int, help="Supplier ID.")
@pass_context
def shipment_add(
    ctx: CliContext, category: int, quantity: int, expiry: str, supplier: int
) -> None:
    """Validate a shipment and append it to the data file."""
    store = ctx.load_store(missing_ok=True)
    handler = AddShipmentHandler(shipment_repo=ctx.shipment_repo)

    try:
        handler.handle(store, category, quantity, expiry, supplier)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Shipment added! Total: {len(store)}")


@click.command("remove")
@click.option("--position", required=True, type=int, help="1-based position, as shown by 'list'.")
@pass_context
def shipment_remove(ctx: CliContext, position: int) -> None:
    """Delete one shipment and rewrite the data file."""
    store = ctx.load_store()

    try:
        removed = RemoveShipmentHandler().handle(store, position)
        SaveShipmentsHandler(shipment_repo=ctx.shipment_repo).handle(store)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Shipment deleted ({removed})! Remaining: {len(store)}")


@click.group("search")
def shipment_search() -> None:
    """Search shipments by category, supplier or expiry date range."""


def _echo_matches(result: QueryResult) -> None:
    echo_shipments(to_dtos(result.matches))
    click.echo(f"Found {result.count} shipments.")


@shipment_search.command("category")
@click.argument("category", type=int)
@pass_context
def search_category(ctx: CliContext, category: int) -> None:
    """Shipments of one category."""
    store = ctx.load_store()
    _echo_matches(SearchShipmentsHandler().handle(store, category=category))


@shipment_search.command("supplier")
@click.argument("supplier_id", type=int)
@pass_context
def search_supplier(ctx: CliContext, supplier_id: int) -> None:
    """Shipments from one supplier."""
    store = ctx.load_store()
    _echo_matches(SearchShipmentsHandler().handle(store, supplier_id=supplier_id))


@shipment_search.command("dates")
@click.argument("start")
@click.argument("end")
@pass_context
def search_dates(ctx: CliContext, start: str, end: str) -> None:
    """Shipments expiring between START and END (inclusive, YYYY-MM-DD)."""
    store = ctx.load_store()
    try:
        result = SearchShipmentsHandler().handle(store, date_range=(start, end))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _echo_matches(result)


@click.command("sort")
@click.option(
    "--by",
    "order",
    required=True,
    type=click.Choice([o.value for o in SortOrder]),
    help="quantity (largest first), category (0-9) or date (earliest first).",
)
@click.option("--save", is_flag=True, default=False, help="Write the sorted order back to the data file.")
@pass_context
def shipment_sort(ctx: CliContext, order: str, save: bool) -> None:
    """Show shipments sorted by quantity, category or date."""
    store = ctx.load_store()

    try:
        SortShipmentsHandler().handle(store, order)
        if save:
            SaveShipmentsHandler(shipment_repo=ctx.shipment_repo).handle(store)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_shipments(ListShipmentsHandler().handle(store))
    if save:
        click.echo(f"Saved {len(store)} shipments to '{ctx.shipment_repo.file_path}'.")


@click.command("report")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Report file (defaults to the configured report file).",
)
@pass_context
def shipment_report(ctx: CliContext, output: Path | None) -> None:
    """Write the inventory report."""
    store = ctx.load_store()
    writer = report_writer(output) if output else ctx.report_writer

    try:
        report = GenerateReportHandler(report_writer=writer).handle(store)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if report is None:
        click.echo("No shipments to report.")
        return
    echo_report_summary(report, str(writer.file_path))
