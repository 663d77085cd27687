"""Supplier management commands."""

import click
from purchasedesk.cli.error_handling import handle_domain_error
from purchasedesk.domain.errors import DomainError
from purchasedesk.domain.supplier import SupplierService


@click.group()
def supplier_group():
    """Manage suppliers."""
    pass


@supplier_group.command("create")
@click.argument("name", metavar="SUPPLIER_NAME")
@click.option("--vat", "vat_number", required=True, help="VAT number")
@click.option("--id", "supplier_id", help="Supplier ID (defaults to a timestamp)")
@click.pass_context
def create_supplier(ctx, name: str, vat_number: str, supplier_id: str | None):
    """Create a new supplier.

    Examples:
        purchasedesk supplier create "Acme S.r.l." --vat IT01234567890
    """
    service = SupplierService(ctx.obj["db"])
    try:
        supplier = service.create_supplier(
            name=name, vat_number=vat_number, supplier_id=supplier_id
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created supplier '{supplier.name}' (ID: {supplier.id})")


@supplier_group.command("list")
@click.option("--search", default="", help="Match name or VAT number")
@click.pass_context
def list_suppliers(ctx, search: str):
    """List suppliers."""
    service = SupplierService(ctx.obj["db"])

    suppliers = service.search_suppliers(search)
    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo("\nSuppliers:")
    click.echo("-" * 80)
    for s in suppliers:
        click.echo(f"ID: {s.id:>15s} | {s.name:30s} | VAT: {s.vat_number}")


@supplier_group.command("update")
@click.argument("supplier_id", metavar="SUPPLIER_ID")
@click.option("--name", help="New name")
@click.option("--vat", "vat_number", help="New VAT number")
@click.pass_context
def update_supplier(ctx, supplier_id: str, name: str | None, vat_number: str | None):
    """Change a supplier's name and/or VAT number."""
    service = SupplierService(ctx.obj["db"])
    current = service.get_supplier(supplier_id)
    if current is None:
        click.echo(f"Error: Supplier '{supplier_id}' not found", err=True)
        ctx.exit(1)

    try:
        supplier = service.update_supplier(
            supplier_id,
            name=name if name is not None else current.name,
            vat_number=vat_number if vat_number is not None else current.vat_number,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated supplier '{supplier.name}'")


@supplier_group.command("delete")
@click.argument("supplier_id", metavar="SUPPLIER_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_supplier(ctx, supplier_id: str, yes: bool):
    """Delete a supplier.

    Purchase orders that refer to the supplier are kept and show '-' in
    place of the supplier name.
    """
    service = SupplierService(ctx.obj["db"])
    if not yes and not click.confirm(f"Are you sure you want to delete supplier {supplier_id}?"):
        click.echo("Deletion cancelled.")
        return
    try:
        service.delete_supplier(supplier_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted supplier {supplier_id}")


def register_commands(cli):
    """Register supplier commands with main CLI."""
    cli.add_command(supplier_group, name="supplier")
