"""CLI commands for user provisioning."""

from __future__ import annotations

import click

from storefront.application.register_user import ProvisionUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.common import load_container


@click.command("provision")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Login email (must be unique).")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Initial password.")
@click.option("--admin", "is_admin", is_flag=True, default=False, help="Grant catalog/admin access.")
@click.option(
    "--delivery-admin",
    "is_delivery_admin",
    is_flag=True,
    default=False,
    help="Grant delivery status access.",
)
def user_provision(
    name: str, email: str, password: str, is_admin: bool, is_delivery_admin: bool
) -> None:
    """Create a user with fixed role flags."""
    container = load_container()
    handler = ProvisionUserHandler(container.user_repo, container.password_hasher)

    try:
        user = handler.handle(
            name=name,
            email=email,
            password=password,
            is_admin=is_admin,
            is_delivery_admin=is_delivery_admin,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    roles = [r for r, on in (("admin", is_admin), ("delivery-admin", is_delivery_admin)) if on]
    click.echo(f"User {user.id} created  ({user.email})")
    click.echo(f"Roles: {', '.join(roles) if roles else 'customer'}")
