"""Service catalog commands."""

import click

from quickquote.cli.business_resolution import current_business_or_exit
from quickquote.cli.error_handling import handle_domain_error
from quickquote.domain.catalog import CatalogService
from quickquote.domain.errors import DomainError
from quickquote.utils.formatting import format_price
from quickquote.utils.price_parser import parse_price


def _parse_price_or_exit(ctx, price: str) -> float:
    try:
        return parse_price(price)
    except ValueError as e:
        click.echo(f"Error: Invalid price: {e}", err=True)
        ctx.exit(1)


@click.group()
def service_group():
    """Manage the catalog of services you quote."""
    pass


@service_group.command("add")
@click.argument("name", metavar="SERVICE_NAME")
@click.option("--price", required=True, help="Unit price (e.g., 45 or $45.00)")
@click.option("--description", help="Service description")
@click.option("--category", help="Category used to group the catalog")
@click.pass_context
def add_service(
    ctx, name: str, price: str, description: str | None, category: str | None
):
    """Add a service to the catalog.

    Examples:
        quickquote service add "Lawn mowing" --price 45 --category Lawn
        quickquote service add "Hedge trimming" --price "$60.00" --description "Per hedge row"
    """
    business = current_business_or_exit(ctx)
    catalog = CatalogService(ctx.obj["db"])
    unit_price = _parse_price_or_exit(ctx, price)

    try:
        service_id = catalog.create_service(
            business_id=business.id,
            name=name,
            price=unit_price,
            description=description,
            category=category,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added service '{name.strip()}' at {format_price(unit_price)} (ID: {service_id})")


@service_group.command("list")
@click.option("--all", "include_inactive", is_flag=True, help="Include removed services")
@click.pass_context
def list_services(ctx, include_inactive: bool):
    """List catalog services by category."""
    business = current_business_or_exit(ctx)
    catalog = CatalogService(ctx.obj["db"])

    services = catalog.list_services(business.id, include_inactive=include_inactive)
    if not services:
        click.echo("No services found.")
        return

    click.echo("\nServices:")
    click.echo("-" * 80)
    click.echo(f"{'Category':<16} {'Name':<30} {'Price':>12}  ID")
    click.echo("-" * 80)
    for svc in services:
        name = svc.name if svc.is_active else f"{svc.name} (removed)"
        click.echo(
            f"{(svc.category or '-'):<16} {name:<30} {format_price(svc.price):>12}  {svc.id}"
        )


@service_group.command("update")
@click.argument("service", metavar="SERVICE")
@click.option("--name", help="New name")
@click.option("--price", help="New unit price")
@click.option("--description", help="New description")
@click.option("--category", help="New category")
@click.pass_context
def update_service(
    ctx,
    service: str,
    name: str | None,
    price: str | None,
    description: str | None,
    category: str | None,
):
    """Update a catalog service.

    SERVICE can be a service name or ID.

    Examples:
        quickquote service update "Lawn mowing" --price 50
    """
    business = current_business_or_exit(ctx)
    catalog = CatalogService(ctx.obj["db"])
    unit_price = _parse_price_or_exit(ctx, price) if price is not None else None

    try:
        svc = catalog.find_service(business.id, service)
        catalog.update_service(
            svc.id, name=name, price=unit_price, description=description, category=category
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated service '{name.strip() if name else svc.name}'")


@service_group.command("remove")
@click.argument("service", metavar="SERVICE")
@click.pass_context
def remove_service(ctx, service: str):
    """Remove a service from the catalog.

    SERVICE can be a service name or ID. Quotes that already use the
    service keep their line items.

    Examples:
        quickquote service remove "Hedge trimming"
    """
    business = current_business_or_exit(ctx)
    catalog = CatalogService(ctx.obj["db"])

    try:
        svc = catalog.find_service(business.id, service)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not click.confirm(f"Are you sure you want to remove service '{svc.name}'?"):
        click.echo("Removal cancelled.")
        return

    catalog.deactivate_service(svc.id)
    click.echo(f"Removed service '{svc.name}'")


def register_commands(cli):
    """Register service commands with main CLI."""
    cli.add_command(service_group, name="service")
