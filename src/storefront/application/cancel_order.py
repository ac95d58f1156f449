"""Application service: Cancel Order use case.

Only the owner of an order may cancel it, and only while it is still
PENDING or PROCESSING. The ownership rule lives on the aggregate so no
caller can skip it.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, requester_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        order.cancel(requester_id)
        self._order_repo.save(order)

        logger.info("Order cancelled", order_id=order_id, user_id=requester_id)
        return order_to_dto(order)
