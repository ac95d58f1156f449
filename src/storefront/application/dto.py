"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.service.payment_gateway import PaymentSession


@dataclass(frozen=True)
class CartItemSpec:
    """Input: one cart line as submitted by the customer.

    Only ``product_id`` and ``quantity`` are trusted. ``price`` is the
    unit price the customer was shown; if given it must match the catalog.
    """

    product_id: str
    quantity: int
    name: str | None = None
    price: str | int | float | Decimal | None = None


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    name: str
    quantity: int
    price: str
    line_total: str


@dataclass(frozen=True)
class UserSummaryDTO:
    id: str
    name: str
    email: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    user_id: str
    status: str
    items: list[OrderItemDTO]
    total_price: str
    currency: str
    payment_session_id: str | None
    created_at: str
    user: UserSummaryDTO | None = None


@dataclass(frozen=True)
class PaymentSessionDTO:
    id: str
    amount: int  # smallest currency unit
    currency: str
    receipt: str


@dataclass(frozen=True)
class CreateOrderResult:
    order: OrderDTO
    payment_session: PaymentSessionDTO | None = None


@dataclass(frozen=True)
class DashboardDTO:
    product_count: int
    total_orders: int
    pending_orders: int
    processing_orders: int
    delivered_orders: int
    returned_orders: int
    daily_order_trends: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class AuthResultDTO:
    token: str
    user_id: str
    is_admin: bool
    is_delivery_admin: bool


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str
    currency: str
    image_url: str


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order, user: User | None = None) -> OrderDTO:
    total = order.total_price
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                name=item.name,
                quantity=item.quantity.value,
                price=str(item.price.amount),
                line_total=str(item.line_total.amount),
            )
            for item in order.items
        ],
        total_price=str(total.amount),
        currency=total.currency,
        payment_session_id=order.payment_session_id,
        created_at=order.created_at.isoformat(),
        user=UserSummaryDTO(id=user.id, name=user.name, email=user.email) if user else None,
    )


def payment_session_to_dto(session: PaymentSession) -> PaymentSessionDTO:
    return PaymentSessionDTO(
        id=session.id,
        amount=session.amount,
        currency=session.currency,
        receipt=session.receipt,
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=str(product.price.amount),
        currency=product.price.currency,
        image_url=product.image_url,
    )
