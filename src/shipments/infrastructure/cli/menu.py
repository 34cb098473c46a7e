"""Interactive menu: one store held for the whole session.

Each menu entry prompts for its fields and calls the matching handler.
Loading replaces the store; add appends to memory and to the data file;
remove and sort only change memory until the store is saved.
"""

from __future__ import annotations

import click

from shipments.application.add_shipment import AddShipmentHandler
from shipments.application.dto import to_dtos
from shipments.application.generate_report import GenerateReportHandler
from shipments.application.list_shipments import ListShipmentsHandler
from shipments.application.load_shipments import LoadShipmentsHandler
from shipments.application.remove_shipment import RemoveShipmentHandler
from shipments.application.save_shipments import SaveShipmentsHandler
from shipments.application.search_shipments import SearchShipmentsHandler
from shipments.application.sort_shipments import SortShipmentsHandler
from shipments.domain.exceptions import DomainException
from shipments.domain.model.store import ShipmentStore
from shipments.domain.service.sorting import SortOrder
from shipments.infrastructure.bootstrap import new_store
from shipments.infrastructure.cli.context import CliContext, pass_context
from shipments.infrastructure.cli.formatting import echo_report_summary, echo_shipments

MENU = """
--- MENU ---
[1] Read Shipments from File
[2] Add New Shipment
[3] Save Shipments to File
[4] Remove Shipment
[5] Search Shipments
[6] Sort Shipments
[7] Generate Report
[8] Exit"""

EXIT_CHOICE = 8


class MenuSession:
    """Dispatches menu choices to the application handlers."""

    def __init__(self, ctx: CliContext, store: ShipmentStore | None = None) -> None:
        self._ctx = ctx
        self.store = store if store is not None else new_store()
        self._actions = {
            1: self.load,
            2: self.add,
            3: self.save,
            4: self.remove,
            5: self.search,
            6: self.sort,
            7: self.report,
        }

    def run(self) -> None:
        click.echo("=== SHIPMENT CATALOG ===")
        while True:
            click.echo(MENU)
            choice = click.prompt("Enter choice", type=int)
            if choice == EXIT_CHOICE:
                click.echo("Goodbye!")
                return
            action = self._actions.get(choice)
            if action is None:
                click.echo("Invalid choice!")
                continue
            try:
                action()
            except DomainException as exc:
                click.echo(f"Error: {exc}", err=True)

    # --- Actions --------------------------------------------------------------

    def load(self) -> None:
        repo = self._ctx.shipment_repo
        result = LoadShipmentsHandler(repo).handle(self.store)
        for warning in result.warnings:
            click.echo(f"Skipped {warning}", err=True)
        click.echo(f"Successfully loaded {result.loaded} shipments from '{repo.file_path}'.")
        echo_shipments(ListShipmentsHandler().handle(self.store))

    def add(self) -> None:
        click.echo("\n--- ADD NEW SHIPMENT ---")
        category = click.prompt("Enter Category (0-9)", type=int)
        quantity = click.prompt("Enter Quantity", type=int)
        expiry = click.prompt("Enter Expiry Date (YYYY-MM-DD)")
        supplier = click.prompt("Enter Supplier ID", type=int)
        AddShipmentHandler(self._ctx.shipment_repo).handle(
            self.store, category, quantity, expiry, supplier
        )
        click.echo(f"Shipment added! Total: {len(self.store)}")

    def save(self) -> None:
        saved = SaveShipmentsHandler(self._ctx.shipment_repo).handle(self.store)
        click.echo(f"Saved {saved} shipments to '{self._ctx.shipment_repo.file_path}'.")

    def remove(self) -> None:
        if not self.store:
            click.echo("No shipments to remove.")
            return
        echo_shipments(ListShipmentsHandler().handle(self.store), numbered=True)
        position = click.prompt(
            f"Enter shipment number to delete (1-{len(self.store)}), or 0 to cancel",
            type=int,
        )
        if position == 0:
            click.echo("Cancelled.")
            return
        RemoveShipmentHandler().handle(self.store, position)
        click.echo(f"Shipment deleted! Remaining: {len(self.store)}")

    def search(self) -> None:
        if not self.store:
            click.echo("No shipments to search.")
            return
        click.echo("\n--- SEARCH SHIPMENTS ---")
        click.echo("[1] Search by Category")
        click.echo("[2] Search by Supplier ID")
        click.echo("[3] Search by Date Range")
        choice = click.prompt("Enter choice", type=click.IntRange(1, 3))

        handler = SearchShipmentsHandler()
        if choice == 1:
            category = click.prompt("Enter Category (0-9)", type=int)
            result = handler.handle(self.store, category=category)
        elif choice == 2:
            supplier = click.prompt("Enter Supplier ID", type=int)
            result = handler.handle(self.store, supplier_id=supplier)
        else:
            start = click.prompt("Enter Start Date (YYYY-MM-DD)")
            end = click.prompt("Enter End Date (YYYY-MM-DD)")
            result = handler.handle(self.store, date_range=(start, end))

        echo_shipments(to_dtos(result.matches))
        click.echo(f"Found {result.count} shipments.")

    def sort(self) -> None:
        if not self.store:
            click.echo("No shipments to sort.")
            return
        click.echo("\n--- SORT SHIPMENTS ---")
        order = click.prompt(
            "Sort by", type=click.Choice([o.value for o in SortOrder]), default="quantity"
        )
        SortShipmentsHandler().handle(self.store, order)
        click.echo(f"Sorted by {order}!")
        echo_shipments(ListShipmentsHandler().handle(self.store))

    def report(self) -> None:
        writer = self._ctx.report_writer
        report = GenerateReportHandler(writer).handle(self.store)
        if report is None:
            click.echo("No shipments to report.")
            return
        echo_report_summary(report, str(writer.file_path))


@click.command("menu")
@pass_context
def menu(ctx: CliContext) -> None:
    """Run the interactive menu."""
    MenuSession(ctx).run()
