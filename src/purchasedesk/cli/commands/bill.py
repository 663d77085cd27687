"""Bill commands."""

import click
from purchasedesk.cli.error_handling import handle_domain_error
from purchasedesk.cli.timestamps import resolve_cli_timestamp
from purchasedesk.domain.bill import BillService
from purchasedesk.domain.entities import BillStatus, FileRef
from purchasedesk.domain.errors import DomainError
from purchasedesk.domain.formatting import format_amount, format_date
from purchasedesk.domain.purchase_order import PurchaseOrderService
from purchasedesk.domain.status import bill_status_label
from purchasedesk.domain.supplier import SupplierService
from purchasedesk.domain.views import ALL_STATUSES, bill_purchase_order_info
from purchasedesk.utils.amount_parser import parse_amount

STATUS_CHOICES = [ALL_STATUSES] + [s.value for s in BillStatus]


def _service(ctx) -> BillService:
    return BillService(ctx.obj["db"], actor=ctx.obj["actor"])


@click.group()
def bill_group():
    """Manage bills."""
    pass


@bill_group.command("import")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--po", "purchase_order_id", required=True, help="Purchase order the bills belong to")
@click.option("--at", "at", help="Upload time (defaults to now)")
@click.pass_context
def import_bills(ctx, files: tuple[str, ...], purchase_order_id: str, at: str | None):
    """Import XML bills for a purchase order.

    Files that are not XML are skipped.

    Examples:
        purchasedesk bill import invoices/*.xml --po ACQ/2025/001
    """
    service = _service(ctx)
    now = resolve_cli_timestamp(ctx, at)
    try:
        bills = service.import_bills(
            [FileRef.from_path(f) for f in files], purchase_order_id=purchase_order_id, now=now
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {len(bills)} bill(s)")
    skipped = len(files) - len(bills)
    if skipped:
        click.echo(f"  Skipped: {skipped} non-XML file(s)")
    for bill in bills:
        click.echo(f"    {bill.id}  {bill.file_name}")


@bill_group.command("list")
@click.option("--search", default="", help="Match bill ID, file name, number, order or supplier")
@click.option(
    "--status",
    type=click.Choice(STATUS_CHOICES),
    default=ALL_STATUSES,
    show_default=True,
    help="Only bills in this status",
)
@click.pass_context
def list_bills(ctx, search: str, status: str):
    """List bills."""
    db = ctx.obj["db"]
    service = _service(ctx)
    orders = PurchaseOrderService(db).list_purchase_orders()
    suppliers = SupplierService(db).list_suppliers()

    bills = service.search_bills(query=search, status=status)
    if not bills:
        click.echo("No bills found.")
        return

    click.echo(f"\nFound {len(bills)} bill(s):")
    click.echo("-" * 120)
    for bill in bills:
        info = bill_purchase_order_info(bill, orders, suppliers)
        click.echo(
            f"{bill.id} | {bill.file_name} | {bill.bill_number or '-'} | "
            f"{format_amount(bill.amount)} | {info['po_name']} | {info['supplier_name']} | "
            f"{format_date(bill.upload_date, with_time=False)} | {bill_status_label(bill.status).label}"
        )


@bill_group.command("set")
@click.argument("bill_id", metavar="BILL_ID")
@click.option("--amount", help="Bill amount in EUR, e.g. 1.234,56")
@click.option("--number", "bill_number", help="Bill number")
@click.pass_context
def set_bill_details(ctx, bill_id: str, amount: str | None, bill_number: str | None):
    """Record the amount and number of a bill."""
    service = _service(ctx)
    value = None
    if amount is not None:
        try:
            value = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
    try:
        bill = service.set_details(bill_id, amount=value, bill_number=bill_number)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated bill {bill.id}: {format_amount(bill.amount)} ({bill.bill_number or '-'})")


def _report(bill) -> None:
    click.echo(f"Bill {bill.id} is now {bill_status_label(bill.status).label}")


@bill_group.command("approve")
@click.argument("bill_id", metavar="BILL_ID")
@click.option("--at", "at", help="Approval time (defaults to now)")
@click.pass_context
def approve_bill(ctx, bill_id: str, at: str | None):
    """Approve a bill for payment."""
    now = resolve_cli_timestamp(ctx, at)
    try:
        _report(_service(ctx).approve_bill(bill_id, now=now))
    except DomainError as e:
        handle_domain_error(ctx, e)


@bill_group.command("reject")
@click.argument("bill_id", metavar="BILL_ID")
@click.pass_context
def reject_bill(ctx, bill_id: str):
    """Reject a bill."""
    try:
        _report(_service(ctx).reject_bill(bill_id))
    except DomainError as e:
        handle_domain_error(ctx, e)


@bill_group.command("pay")
@click.argument("bill_id", metavar="BILL_ID")
@click.option("--at", "at", help="Payment time (defaults to now)")
@click.pass_context
def pay_bill(ctx, bill_id: str, at: str | None):
    """Mark an approved bill as paid."""
    now = resolve_cli_timestamp(ctx, at)
    try:
        _report(_service(ctx).pay_bill(bill_id, now=now))
    except DomainError as e:
        handle_domain_error(ctx, e)


@bill_group.command("delete")
@click.argument("bill_id", metavar="BILL_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_bill(ctx, bill_id: str, yes: bool):
    """Delete a bill."""
    if not yes and not click.confirm(f"Are you sure you want to delete bill {bill_id}?"):
        click.echo("Deletion cancelled.")
        return
    try:
        _service(ctx).delete_bill(bill_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted bill {bill_id}")


def register_commands(cli):
    """Register bill commands with main CLI."""
    cli.add_command(bill_group, name="bill")
