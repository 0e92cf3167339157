"""CLI helper for resolving the business a database belongs to."""

import click

from quickquote.cli.error_handling import handle_domain_error
from quickquote.domain.business import BusinessService
from quickquote.domain.entities import Business
from quickquote.domain.errors import NotFoundError


def current_business_or_exit(ctx: click.Context) -> Business:
    """Return the configured business, or exit telling the user to set one up."""
    try:
        return BusinessService(ctx.obj["db"]).get_current_business()
    except NotFoundError as e:
        handle_domain_error(ctx, e)
