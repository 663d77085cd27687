"""Purchase order commands."""

import click
from purchasedesk.cli.error_handling import handle_domain_error
from purchasedesk.cli.timestamps import resolve_cli_timestamp
from purchasedesk.domain import lifecycle
from purchasedesk.domain.entities import FileRef, PurchaseOrderStatus
from purchasedesk.domain.errors import DomainError
from purchasedesk.domain.files import select_signed_file
from purchasedesk.domain.formatting import format_amount, format_date
from purchasedesk.domain.project import ProjectService
from purchasedesk.domain.purchase_order import PurchaseOrderService
from purchasedesk.domain.status import bill_status_label, purchase_order_status_label
from purchasedesk.domain.supplier import SupplierService
from purchasedesk.domain.views import ALL_STATUSES, supplier_name

STATUS_CHOICES = [ALL_STATUSES] + [s.value for s in PurchaseOrderStatus]


def _service(ctx) -> PurchaseOrderService:
    return PurchaseOrderService(ctx.obj["db"], actor=ctx.obj["actor"])


@click.group()
def po_group():
    """Manage purchase orders."""
    pass


@po_group.command("create")
@click.option("--name", required=True, help="Purchase order name")
@click.option("--supplier", "supplier_id", required=True, help="Supplier ID")
@click.option("--explanation", required=True, help="Reason for the purchase")
@click.option(
    "--signed-file",
    "signed_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Signed request (PDF, image or Word). If given more than once, the last valid file is kept",
)
@click.option("--cig", "cig_code", help="CIG code (10 characters)")
@click.option("--project", "project_id", help="Project ID")
@click.option("--submit", is_flag=True, help="Send for approval right away")
@click.option("--at", "at", help="Creation time (defaults to now)")
@click.pass_context
def create_po(ctx, name, supplier_id, explanation, signed_files, cig_code, project_id, submit, at):
    """Create a purchase order.

    The ID is assigned automatically as ACQ/<year>/<number>.

    Examples:
        purchasedesk po create --name "Laptops" --supplier S-1 \\
            --explanation "New hires" --signed-file request.pdf --cig 1234567890
    """
    service = _service(ctx)
    now = resolve_cli_timestamp(ctx, at)
    signed_file = select_signed_file(FileRef.from_path(p) for p in signed_files)

    try:
        po = service.create_purchase_order(
            name=name,
            supplier_id=supplier_id,
            explanation=explanation,
            signed_file=signed_file,
            cig_code=cig_code,
            project_id=project_id,
            now=now,
        )
        if submit:
            po = service.submit(po.id, now=now)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created purchase order {po.id} ({purchase_order_status_label(po.status).label})")


@po_group.command("list")
@click.option("--search", default="", help="Match ID, name, CIG, supplier or project")
@click.option(
    "--status",
    type=click.Choice(STATUS_CHOICES),
    default=ALL_STATUSES,
    show_default=True,
    help="Only orders in this status",
)
@click.pass_context
def list_pos(ctx, search: str, status: str):
    """List purchase orders."""
    db = ctx.obj["db"]
    service = _service(ctx)
    suppliers = SupplierService(db).list_suppliers()
    projects = ProjectService(db)

    orders = service.search_purchase_orders(query=search, status=status)
    if not orders:
        click.echo("No purchase orders found.")
        return

    click.echo(f"\nFound {len(orders)} purchase order(s):")
    click.echo("-" * 120)
    click.echo(f"{'ID':<14} | {'Name':<25} | {'CIG':<10} | {'Supplier':<20} | {'Project':<25} | Status")
    click.echo("-" * 120)
    for po in orders:
        click.echo(
            f"{po.id:<14} | {po.name[:25]:<25} | {po.cig_code or '-':<10} | "
            f"{supplier_name(suppliers, po.supplier_id)[:20]:<20} | "
            f"{projects.display_name(po.project_id)[:25]:<25} | "
            f"{purchase_order_status_label(po.status).label}"
        )


@po_group.command("show")
@click.argument("po_id", metavar="PO_ID")
@click.pass_context
def show_po(ctx, po_id: str):
    """Show a purchase order with its bills and timeline."""
    service = _service(ctx)
    try:
        details = service.get_details(po_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    po = details.purchase_order
    click.echo(f"\nPurchase order {po.id} [{details.status_label.label}]")
    click.echo("=" * 80)
    click.echo(f"  Name: {po.name}")
    click.echo(f"  CIG: {po.cig_code or '-'}")
    click.echo(f"  Supplier: {details.supplier_name}")
    click.echo(f"  Project: {details.project_display}")
    if po.explanation:
        click.echo(f"  Explanation: {po.explanation}")
    if po.signed_file:
        click.echo(f"  Signed file: {po.signed_file.name}")

    click.echo(f"\nBills ({len(details.bills)}):")
    if not details.bills:
        click.echo("  No bills yet.")
    else:
        click.echo(f"  Total amount: {format_amount(details.total_amount)}")
        for bill in details.bills:
            click.echo(
                f"  {bill.id} | {bill.file_name} | {format_amount(bill.amount)} | "
                f"{bill_status_label(bill.status).label}"
            )

    click.echo("\nTimeline:")
    for event in details.timeline:
        user = f" ({event.user})" if event.user else ""
        click.echo(f"  {format_date(event.date)}  {event.description}{user}")

    if details.actions:
        click.echo(f"\nAvailable actions: {', '.join(details.actions)}")


@po_group.command("edit")
@click.argument("po_id", metavar="PO_ID")
@click.option("--name", help="New name")
@click.option("--supplier", "supplier_id", help="New supplier ID")
@click.option("--explanation", help="New explanation")
@click.option("--cig", "cig_code", help="New CIG code (empty string clears it)")
@click.option("--project", "project_id", help="New project ID (empty string clears it)")
@click.option(
    "--signed-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Replace the signed request",
)
@click.pass_context
def edit_po(ctx, po_id, name, supplier_id, explanation, cig_code, project_id, signed_file):
    """Edit a purchase order's details."""
    service = _service(ctx)
    changes = {
        key: value
        for key, value in (
            ("name", name),
            ("supplier_id", supplier_id),
            ("explanation", explanation),
            ("cig_code", cig_code),
            ("project_id", project_id),
        )
        if value is not None
    }
    if signed_file is not None:
        selected = select_signed_file([FileRef.from_path(signed_file)])
        if selected is None:
            click.echo("Error: Signed file must be a PDF, image or Word document", err=True)
            ctx.exit(1)
        changes["signed_file"] = selected

    if not changes:
        click.echo("Nothing to change.")
        return

    try:
        service.update_purchase_order(po_id, **changes)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated purchase order {po_id}")


@po_group.command("delete")
@click.argument("po_id", metavar="PO_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_po(ctx, po_id: str, yes: bool):
    """Delete a purchase order. Its bills are kept."""
    service = _service(ctx)
    if not yes and not click.confirm(f"Are you sure you want to delete purchase order {po_id}?"):
        click.echo("Deletion cancelled.")
        return
    try:
        service.delete_purchase_order(po_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted purchase order {po_id}")


def _make_action_command(action: str, help_text: str, takes_time: bool = True):
    @click.argument("po_id", metavar="PO_ID")
    @click.pass_context
    def command(ctx, po_id: str, at: str | None = None):
        service = _service(ctx)
        now = resolve_cli_timestamp(ctx, at)
        try:
            po = service.apply_action(po_id, action, now=now)
        except DomainError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Purchase order {po.id} is now {purchase_order_status_label(po.status).label}")

    command.__doc__ = help_text
    if takes_time:
        command = click.option("--at", "at", help="Time of the action (defaults to now)")(command)
    return po_group.command(action)(command)


_make_action_command(lifecycle.SUBMIT, "Send a draft purchase order for approval.")
_make_action_command(lifecycle.APPROVE, "Approve a purchase order waiting for approval.")
_make_action_command(lifecycle.REJECT, "Reject a purchase order waiting for approval.")
_make_action_command(lifecycle.ASSIGN, "Assign an approved purchase order to its supplier.")
_make_action_command(lifecycle.PAY, "Mark an assigned purchase order as paid.", takes_time=False)
_make_action_command(lifecycle.CLOSE, "Close an assigned or paid purchase order.")


def register_commands(cli):
    """Register purchase order commands with main CLI."""
    cli.add_command(po_group, name="po")
