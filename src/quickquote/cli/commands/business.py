"""Business profile commands."""

import click

from quickquote.cli.business_resolution import current_business_or_exit
from quickquote.cli.error_handling import handle_domain_error
from quickquote.domain.business import BusinessService
from quickquote.domain.errors import DomainError


@click.group()
def business_group():
    """Set up and manage your business profile."""
    pass


@business_group.command("setup")
@click.argument("name", metavar="BUSINESS_NAME")
@click.option("--phone", help="Business phone number")
@click.option("--email", help="Business email address")
@click.option("--address", help="Business address")
@click.option("--terms", help="Default terms printed on every quote")
@click.option(
    "--validity-days",
    type=int,
    default=7,
    show_default=True,
    help="Days a new quote stays valid",
)
@click.option("--logo-url", help="URL of the business logo")
@click.pass_context
def setup_business(
    ctx,
    name: str,
    phone: str | None,
    email: str | None,
    address: str | None,
    terms: str | None,
    validity_days: int,
    logo_url: str | None,
):
    """Create the business profile used on all quotes.

    Examples:
        quickquote business setup "Green Lawn Co" --phone "555-0100"
        quickquote business setup "Sparkle Cleaning" --validity-days 14 --terms "50% upfront"
    """
    service = BusinessService(ctx.obj["db"])

    try:
        business_id = service.create_business(
            name=name,
            default_validity_days=validity_days,
            phone=phone,
            email=email,
            address=address,
            default_terms=terms,
            logo_url=logo_url,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created business '{name.strip()}' (ID: {business_id})")
    click.echo(f"Quotes are valid for {validity_days} days by default")


@business_group.command("show")
@click.pass_context
def show_business(ctx):
    """Show the business profile."""
    business = current_business_or_exit(ctx)

    click.echo(f"\n{business.name}")
    click.echo("-" * 60)
    click.echo(f"ID:             {business.id}")
    click.echo(f"Phone:          {business.phone or '-'}")
    click.echo(f"Email:          {business.email or '-'}")
    click.echo(f"Address:        {business.address or '-'}")
    click.echo(f"Quote validity: {business.default_validity_days} days")
    click.echo(f"Default terms:  {business.default_terms or '-'}")
    if business.logo_url:
        click.echo(f"Logo:           {business.logo_url}")


@business_group.command("update")
@click.option("--name", help="New business name")
@click.option("--phone", help="New phone number")
@click.option("--email", help="New email address")
@click.option("--address", help="New address")
@click.option("--terms", help="New default terms")
@click.option("--validity-days", type=int, help="New default quote validity in days")
@click.option("--logo-url", help="New logo URL")
@click.pass_context
def update_business(
    ctx,
    name: str | None,
    phone: str | None,
    email: str | None,
    address: str | None,
    terms: str | None,
    validity_days: int | None,
    logo_url: str | None,
):
    """Update the business profile.

    Only the options given are changed.

    Examples:
        quickquote business update --validity-days 30
        quickquote business update --phone "555-0199" --email "hello@greenlawn.example"
    """
    business = current_business_or_exit(ctx)
    service = BusinessService(ctx.obj["db"])

    try:
        service.update_business(
            business.id,
            name=name,
            default_validity_days=validity_days,
            phone=phone,
            email=email,
            address=address,
            default_terms=terms,
            logo_url=logo_url,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated business '{name.strip() if name else business.name}'")


def register_commands(cli):
    """Register business commands with main CLI."""
    cli.add_command(business_group, name="business")
