"""Customer commands."""

import click

from quickquote.cli.business_resolution import current_business_or_exit
from quickquote.cli.error_handling import handle_domain_error
from quickquote.domain.customer import CustomerService
from quickquote.domain.errors import DomainError


@click.group()
def customer_group():
    """Manage customers."""
    pass


@customer_group.command("add")
@click.argument("name", metavar="CUSTOMER_NAME")
@click.option("--phone", required=True, help="Customer phone number (used for WhatsApp)")
@click.option("--email", help="Customer email address")
@click.option("--address", help="Customer address")
@click.pass_context
def add_customer(ctx, name: str, phone: str, email: str | None, address: str | None):
    """Add a customer.

    Examples:
        quickquote customer add "Jane Doe" --phone "+1 (555) 010-2030"
    """
    business = current_business_or_exit(ctx)
    service = CustomerService(ctx.obj["db"])

    try:
        customer_id = service.create_customer(
            business_id=business.id, name=name, phone=phone, email=email, address=address
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added customer '{name.strip()}' (ID: {customer_id})")


@customer_group.command("list")
@click.option("--search", help="Only customers whose name or phone contains this text")
@click.pass_context
def list_customers(ctx, search: str | None):
    """List customers."""
    business = current_business_or_exit(ctx)
    service = CustomerService(ctx.obj["db"])

    customers = service.list_customers(business.id, search=search)
    if not customers:
        click.echo("No customers found.")
        return

    click.echo("\nCustomers:")
    click.echo("-" * 80)
    for customer in customers:
        click.echo(
            f"{customer.name:<25} | {customer.phone:<18} | {(customer.email or '-'):<25} | {customer.id}"
        )


@customer_group.command("update")
@click.argument("customer", metavar="CUSTOMER")
@click.option("--name", help="New name")
@click.option("--phone", help="New phone number")
@click.option("--email", help="New email address")
@click.option("--address", help="New address")
@click.pass_context
def update_customer(
    ctx,
    customer: str,
    name: str | None,
    phone: str | None,
    email: str | None,
    address: str | None,
):
    """Update a customer.

    CUSTOMER can be a customer name or ID.

    Examples:
        quickquote customer update "Jane Doe" --email "jane@example.com"
    """
    business = current_business_or_exit(ctx)
    service = CustomerService(ctx.obj["db"])

    try:
        existing = service.find_customer(business.id, customer)
        service.update_customer(
            existing.id, name=name, phone=phone, email=email, address=address
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated customer '{name.strip() if name else existing.name}'")


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customer")
