"""Dashboard command."""

import click
from purchasedesk.domain.dashboard import DashboardService
from purchasedesk.domain.status import bill_status_label, purchase_order_status_label


@click.command("dashboard")
@click.pass_context
def show_dashboard(ctx):
    """Show totals and status counts."""
    summary = DashboardService(ctx.obj["db"]).get_summary()

    click.echo("\nDashboard")
    click.echo("=" * 40)
    click.echo(f"  Customers:       {summary['customers']}")
    click.echo(f"  Projects:        {summary['projects']}")
    click.echo(f"  Suppliers:       {summary['suppliers']}")
    click.echo(f"  Purchase orders: {summary['purchase_orders']}")
    click.echo(f"  Bills:           {summary['bills']}")

    click.echo("\nPurchase orders by status:")
    for status, count in summary["purchase_orders_by_status"].items():
        if count:
            click.echo(f"  {purchase_order_status_label(status).label:35s} {count}")

    click.echo("\nBills by status:")
    for status, count in summary["bills_by_status"].items():
        if count:
            click.echo(f"  {bill_status_label(status).label:35s} {count}")


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(show_dashboard)
