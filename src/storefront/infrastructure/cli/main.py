import click
import uvicorn

from storefront.infrastructure.cli.order_commands import dashboard, order_list
from storefront.infrastructure.cli.user_commands import user_provision


@click.group()
def cli() -> None:
    """Storefront: orders, payments and fulfillment"""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", default=8000, show_default=True, type=int, help="Bind port.")
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    uvicorn.run(
        "storefront.infrastructure.api.app:create_app",
        factory=True,
        host=host,
        port=port,
    )


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def order() -> None:
    """Inspect orders."""


# Register subcommands
user.add_command(user_provision)
order.add_command(order_list)
cli.add_command(dashboard)
