"""Project management commands."""

import click
from purchasedesk.cli.error_handling import handle_domain_error
from purchasedesk.domain.customer import CustomerService
from purchasedesk.domain.errors import DomainError
from purchasedesk.domain.project import ProjectService
from purchasedesk.domain.views import customer_name


@click.group()
def project_group():
    """Manage projects."""
    pass


@project_group.command("create")
@click.option("--customer", "customer_id", help="Customer ID")
@click.option("--cup", "cup_code", help="CUP code (15 characters)")
@click.option("--id", "project_id", help="Project ID (defaults to a timestamp)")
@click.pass_context
def create_project(ctx, customer_id: str | None, cup_code: str | None, project_id: str | None):
    """Create a new project.

    Examples:
        purchasedesk project create --customer C-001 --cup J11B22000120004
    """
    service = ProjectService(ctx.obj["db"])
    try:
        project = service.create_project(
            customer_id=customer_id, cup_code=cup_code, project_id=project_id
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created project {project.id}")


@project_group.command("list")
@click.option("--search", default="", help="Match project ID, customer name or CUP code")
@click.pass_context
def list_projects(ctx, search: str):
    """List projects."""
    db = ctx.obj["db"]
    service = ProjectService(db)
    customers = CustomerService(db).list_customers()

    projects = service.search_projects(search)
    if not projects:
        click.echo("No projects found.")
        return

    click.echo("\nProjects:")
    click.echo("-" * 80)
    for p in projects:
        click.echo(
            f"ID: {p.id:>15s} | Customer: {customer_name(customers, p.customer_id):25s} "
            f"| CUP: {p.cup_code or '-'}"
        )


@project_group.command("update")
@click.argument("project_id", metavar="PROJECT_ID")
@click.option("--customer", "customer_id", help="Customer ID (omit to clear)")
@click.option("--cup", "cup_code", help="CUP code (omit to clear)")
@click.pass_context
def update_project(ctx, project_id: str, customer_id: str | None, cup_code: str | None):
    """Replace a project's customer and CUP code."""
    service = ProjectService(ctx.obj["db"])
    try:
        service.update_project(project_id, customer_id=customer_id, cup_code=cup_code)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated project {project_id}")


@project_group.command("delete")
@click.argument("project_id", metavar="PROJECT_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_project(ctx, project_id: str, yes: bool):
    """Delete a project."""
    service = ProjectService(ctx.obj["db"])
    if not yes and not click.confirm(f"Are you sure you want to delete project {project_id}?"):
        click.echo("Deletion cancelled.")
        return
    try:
        service.delete_project(project_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted project {project_id}")


def register_commands(cli):
    """Register project commands with main CLI."""
    cli.add_command(project_group, name="project")
