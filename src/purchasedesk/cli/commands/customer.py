"""Customer management commands."""

import click
from purchasedesk.cli.error_handling import handle_domain_error
from purchasedesk.domain.customer import CustomerService
from purchasedesk.domain.errors import DomainError


@click.group()
def customer_group():
    """Manage customers."""
    pass


@customer_group.command("create")
@click.argument("name", metavar="CUSTOMER_NAME")
@click.option("--id", "customer_id", help="Customer ID (defaults to a timestamp)")
@click.pass_context
def create_customer(ctx, name: str, customer_id: str | None):
    """Create a new customer.

    Examples:
        purchasedesk customer create "Comune di Milano"
        purchasedesk customer create "ASL Roma 1" --id C-001
    """
    service = CustomerService(ctx.obj["db"])
    try:
        customer = service.create_customer(name=name, customer_id=customer_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created customer '{customer.name}' (ID: {customer.id})")


@customer_group.command("list")
@click.option("--search", default="", help="Only customers whose name contains this text")
@click.pass_context
def list_customers(ctx, search: str):
    """List customers."""
    service = CustomerService(ctx.obj["db"])

    customers = service.search_customers(search)
    if not customers:
        click.echo("No customers found.")
        return

    click.echo("\nCustomers:")
    click.echo("-" * 60)
    for c in customers:
        click.echo(f"ID: {c.id:>15s} | {c.name}")


@customer_group.command("rename")
@click.argument("customer_id", metavar="CUSTOMER_ID")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_customer(ctx, customer_id: str, new_name: str):
    """Rename a customer."""
    service = CustomerService(ctx.obj["db"])
    try:
        service.rename_customer(customer_id, new_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed customer to '{new_name.strip()}'")


@customer_group.command("delete")
@click.argument("customer_id", metavar="CUSTOMER_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_customer(ctx, customer_id: str, yes: bool):
    """Delete a customer.

    Projects that refer to the customer are kept and show '-' in place of
    the customer name.
    """
    service = CustomerService(ctx.obj["db"])
    customer = service.get_customer(customer_id)
    if customer is None:
        click.echo(f"Error: Customer '{customer_id}' not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete customer '{customer.name}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_customer(customer_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted customer '{customer.name}'")


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customer")
