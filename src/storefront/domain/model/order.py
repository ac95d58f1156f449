"""Order aggregate, the core of the ledger.

The Order is an aggregate root that owns its line items.
All lifecycle rules (creation, cancellation, delivery updates) are
enforced here; the ledger never deletes an order, it only moves it
between statuses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import (
    EmptyCartError,
    InvalidOrderStateError,
    NotOrderOwnerError,
    ValidationError,
)
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    DELIVERED = "Delivered"
    RETURNED = "Returned"
    CANCELED = "Canceled"

    @classmethod
    def parse(cls, raw: str | OrderStatus) -> OrderStatus:
        if isinstance(raw, OrderStatus):
            return raw
        for status in cls:
            if status.value.lower() == str(raw).strip().lower():
                return status
        raise InvalidOrderStateError(f"Unknown order status '{raw}'")


CANCELLABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.PROCESSING})

# Edges a delivery admin may take. Anything not listed is rejected.
DELIVERY_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset(
        {OrderStatus.PROCESSING, OrderStatus.DELIVERED, OrderStatus.RETURNED}
    ),
    OrderStatus.PROCESSING: frozenset({OrderStatus.DELIVERED, OrderStatus.RETURNED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.RETURNED: frozenset(),
    OrderStatus.CANCELED: frozenset(),
}


@dataclass(frozen=True)
class OrderItem:
    """Captures name and unit price of a product at order-creation time.

    Later catalog changes never reach an existing order.
    """

    product_id: str
    name: str
    quantity: Quantity
    price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces the
    creation rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    user_id: str
    items: list[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    payment_session_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 0

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(user_id: str, items: list[OrderItem]) -> Order:
        """Create a new, unsaved order in PENDING.

        Orders that go through the payment handshake must have a session
        attached (``attach_payment_session``) before the first save, so
        they are stored directly in PROCESSING.
        """
        if not user_id:
            raise ValidationError("Order owner is required")
        if not items:
            raise EmptyCartError()

        currencies = {item.price.currency for item in items}
        if len(currencies) > 1:
            raise ValidationError("All items in an order must share one currency")

        return Order(id=None, user_id=user_id, items=list(items))

    # --- State transitions ----------------------------------------------------

    def attach_payment_session(self, session_id: str) -> None:
        """Transition a new PENDING order -> PROCESSING with its session handle."""
        if self.id is not None or self.payment_session_id is not None:
            raise InvalidOrderStateError(
                "A payment session can only be attached to a new order"
            )
        if self.status != OrderStatus.PENDING:
            raise InvalidOrderStateError(
                f"Cannot attach payment to order in {self.status.value} status"
            )
        self.payment_session_id = session_id
        self.status = OrderStatus.PROCESSING

    def cancel(self, requester_id: str) -> None:
        """Transition PENDING|PROCESSING -> CANCELED, owner only."""
        if requester_id != self.user_id:
            raise NotOrderOwnerError()
        if self.status not in CANCELLABLE_STATUSES:
            raise InvalidOrderStateError(
                f"Cannot cancel order in {self.status.value} status"
            )
        self.status = OrderStatus.CANCELED

    def set_delivery_status(self, new_status: OrderStatus | str) -> OrderStatus:
        """Move the order along a delivery edge; returns the previous status."""
        target = OrderStatus.parse(new_status)
        if self.is_terminal:
            raise InvalidOrderStateError(
                f"Cannot change order status of a {self.status.value} order; "
                "it is final"
            )
        if target not in DELIVERY_TRANSITIONS[self.status]:
            raise InvalidOrderStateError(
                f"Cannot change order status from {self.status.value} "
                f"to {target.value}"
            )
        previous = self.status
        self.status = target
        return previous

    # --- Computed properties --------------------------------------------------

    @property
    def total_price(self) -> Money:
        result = Money.zero(self.items[0].price.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_terminal(self) -> bool:
        return not DELIVERY_TRANSITIONS[self.status]
