"""Application service: Set Delivery Status use case (delivery admins)."""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import InvalidOrderStateError, OrderNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class SetDeliveryStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, new_status: OrderStatus | str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        try:
            previous = order.set_delivery_status(new_status)
        except InvalidOrderStateError as exc:
            logger.warning(
                "Rejected delivery status change",
                order_id=order_id,
                current=order.status.value,
                requested=str(new_status),
                reason=str(exc),
            )
            raise

        self._order_repo.save(order)
        logger.info(
            "Delivery status changed",
            order_id=order_id,
            previous=previous.value,
            status=order.status.value,
        )
        return order_to_dto(order)
