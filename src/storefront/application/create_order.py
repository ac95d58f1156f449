"""Application service: Create Order use case.

Two entry paths share this handler:

- direct creation, which stores the order in PENDING;
- pay-initiation, which first asks the payment gateway for a session
  and stores the order in PROCESSING with that session attached.

On the payment path nothing is written unless the gateway succeeds.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import (
    CartItemSpec,
    CreateOrderResult,
    order_to_dto,
    payment_session_to_dto,
)
from storefront.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    PaymentInitError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.payment_gateway import PaymentGateway

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        payment_gateway: PaymentGateway,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._payment_gateway = payment_gateway

    def handle(
        self,
        user_id: str,
        items: list[CartItemSpec],
        total_price: str | int | float | None = None,
        with_payment: bool = False,
    ) -> CreateOrderResult:
        """Create a new order for *user_id*.

        Steps:
        1. Reject an empty cart before anything else happens.
        2. Resolve each line to a catalog Product (fail if not found) and
           build OrderItems with its *current* name and price (snapshot).
        3. If the client sent a total, it must match the computed one.
        4. On the payment path, allocate a gateway session.
        5. Persist and return a DTO.
        """
        if not items:
            raise EmptyCartError()

        line_items = [self._snapshot(spec) for spec in items]
        order = Order.create(user_id=user_id, items=line_items)

        if total_price is not None:
            claimed = Money.of(total_price, order.total_price.currency)
            if claimed != order.total_price:
                raise ValidationError(
                    f"Total price {claimed.amount} does not match cart total "
                    f"{order.total_price.amount}"
                )

        session = None
        if with_payment:
            try:
                session = self._payment_gateway.create_session(
                    order.total_price, receipt=f"receipt_{user_id}"
                )
            except PaymentInitError as exc:
                logger.warning(
                    "Payment initiation failed; order not stored",
                    user_id=user_id,
                    total=str(order.total_price.amount),
                    reason=str(exc),
                )
                raise
            logger.info(
                "Payment session allocated",
                user_id=user_id,
                payment_session_id=session.id,
                amount=session.amount,
            )
            order.attach_payment_session(session.id)

        try:
            self._order_repo.save(order)
        except Exception:
            if session is not None:
                logger.error(
                    "Order write failed after payment session was allocated",
                    user_id=user_id,
                    payment_session_id=session.id,
                )
            raise

        logger.info(
            "Order created",
            order_id=order.id,
            user_id=user_id,
            status=order.status.value,
            total=str(order.total_price.amount),
        )
        return CreateOrderResult(
            order=order_to_dto(order),
            payment_session=payment_session_to_dto(session) if session else None,
        )

    def _snapshot(self, spec: CartItemSpec) -> OrderItem:
        product = self._product_repo.get_by_id(spec.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{spec.product_id}'")

        if spec.price is not None:
            shown = Money.of(spec.price, product.price.currency)
            if shown != product.price:
                raise ValidationError(
                    f"Price of '{product.name}' is {product.price.amount}, "
                    f"not {shown.amount}"
                )

        return OrderItem(
            product_id=product.id,
            name=product.name,
            quantity=Quantity(spec.quantity),
            price=product.price,  # locked at order-creation time
        )
