"""CLI commands for inspecting the order ledger."""

from __future__ import annotations

import click

from storefront.application.dashboard import DashboardHandler
from storefront.application.list_orders import ListAllOrdersHandler, ListUserOrdersHandler
from storefront.infrastructure.cli.common import load_container


@click.command("list")
@click.option("--user-id", default=None, help="Only show orders owned by this user.")
def order_list(user_id: str | None) -> None:
    """List orders, newest first."""
    container = load_container()
    if user_id:
        orders = ListUserOrdersHandler(container.order_repo).handle(user_id)
    else:
        orders = ListAllOrdersHandler(container.order_repo, container.user_repo).handle(
            include_user_detail=True
        )

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<34} {'Status':<12} {'Total':>12} {'Customer':<24} Created")
    click.echo("-" * 100)
    for dto in orders:
        customer = dto.user.email if dto.user else dto.user_id
        total = f"{dto.total_price} {dto.currency}"
        click.echo(
            f"{dto.id:<34} {dto.status:<12} {total:>12} {customer:<24} {dto.created_at}"
        )


@click.command("dashboard")
def dashboard() -> None:
    """Show catalog and order counts."""
    container = load_container()
    summary = DashboardHandler(container.order_repo, container.product_repo).handle()

    click.echo(f"Products:    {summary.product_count}")
    click.echo(f"Orders:      {summary.total_orders}")
    click.echo(f"  Pending:    {summary.pending_orders}")
    click.echo(f"  Processing: {summary.processing_orders}")
    click.echo(f"  Delivered:  {summary.delivered_orders}")
    click.echo(f"  Returned:   {summary.returned_orders}")
