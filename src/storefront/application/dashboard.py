"""Application service: Admin Dashboard use case (query).

Counts are computed from the ledger on every call; nothing is cached.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from storefront.application.dto import DashboardDTO
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

TREND_WINDOW = timedelta(days=30)


class DashboardHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def handle(self) -> DashboardDTO:
        orders = self._order_repo.list_all()
        by_status = Counter(order.status for order in orders)

        since = self._clock() - TREND_WINDOW
        trend = Counter(
            order.created_at.astimezone(timezone.utc).date().isoformat()
            for order in orders
            if order.created_at >= since
        )

        return DashboardDTO(
            product_count=self._product_repo.count(),
            total_orders=len(orders),
            pending_orders=by_status[OrderStatus.PENDING],
            processing_orders=by_status[OrderStatus.PROCESSING],
            delivered_orders=by_status[OrderStatus.DELIVERED],
            returned_orders=by_status[OrderStatus.RETURNED],
            daily_order_trends=dict(sorted(trend.items())),
        )
