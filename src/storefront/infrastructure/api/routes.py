"""FastAPI routes for auth, catalog, orders, admin and delivery.

Handlers are plain ``def`` functions: the application layer blocks on
file and gateway I/O, so FastAPI runs them in its worker thread pool.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from storefront.application.add_product import AddProductHandler
from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dashboard import DashboardHandler
from storefront.application.dto import CartItemSpec
from storefront.application.list_orders import ListAllOrdersHandler, ListUserOrdersHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.login_user import LoginHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.set_delivery_status import SetDeliveryStatusHandler
from storefront.domain.model.user import Claim
from storefront.infrastructure.api.dependencies import (
    admin_only,
    authenticated,
    delivery_admin_only,
    get_container,
)
from storefront.infrastructure.api.schemas import (
    LoginRequest,
    PlaceOrderRequest,
    ProductRequest,
    RegisterRequest,
    StatusUpdateRequest,
)
from storefront.infrastructure.bootstrap import Container

# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(tags=["auth"])


@auth_router.post("/register")
def register(body: RegisterRequest, container: Container = Depends(get_container)) -> dict:
    handler = RegisterUserHandler(
        container.user_repo, container.password_hasher, container.token_service
    )
    return asdict(handler.handle(body.name, body.email, body.password))


@auth_router.post("/login")
def login(body: LoginRequest, container: Container = Depends(get_container)) -> dict:
    handler = LoginHandler(
        container.user_repo, container.password_hasher, container.token_service
    )
    return asdict(handler.handle(body.email, body.password))


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("")
def list_products(container: Container = Depends(get_container)) -> list[dict]:
    return [asdict(p) for p in ListProductsHandler(container.product_repo).handle()]


@product_router.post("")
def add_product(
    body: ProductRequest,
    _: Claim = Depends(admin_only),
    container: Container = Depends(get_container),
) -> dict:
    handler = AddProductHandler(container.product_repo, container.settings.currency)
    return asdict(
        handler.handle(body.name, body.description, body.price, body.image_url)
    )


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _place_order(
    body: PlaceOrderRequest, claim: Claim, container: Container, with_payment: bool
) -> dict:
    handler = CreateOrderHandler(
        container.order_repo, container.product_repo, container.payment_gateway
    )
    result = handler.handle(
        user_id=claim.user_id,
        items=[
            CartItemSpec(
                product_id=item.product_id,
                quantity=item.quantity,
                name=item.name,
                price=item.price,
            )
            for item in body.cart_items
        ],
        total_price=body.total_price,
        with_payment=with_payment,
    )
    return asdict(result)


@order_router.post("/pay")
def pay_for_order(
    body: PlaceOrderRequest,
    claim: Claim = Depends(authenticated),
    container: Container = Depends(get_container),
) -> dict:
    """Allocate a payment session and record the order in Processing."""
    return _place_order(body, claim, container, with_payment=True)


@order_router.post("")
def place_order(
    body: PlaceOrderRequest,
    claim: Claim = Depends(authenticated),
    container: Container = Depends(get_container),
) -> dict:
    """Record an order in Pending without a payment handshake."""
    return _place_order(body, claim, container, with_payment=False)


@order_router.get("/my-orders")
def my_orders(
    claim: Claim = Depends(authenticated),
    container: Container = Depends(get_container),
) -> list[dict]:
    orders = ListUserOrdersHandler(container.order_repo).handle(claim.user_id)
    return [asdict(o) for o in orders]


@order_router.put("/{order_id}/cancel")
def cancel_order(
    order_id: str,
    claim: Claim = Depends(authenticated),
    container: Container = Depends(get_container),
) -> dict:
    return asdict(CancelOrderHandler(container.order_repo).handle(order_id, claim.user_id))


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(admin_only)])


@admin_router.get("/dashboard")
def dashboard(container: Container = Depends(get_container)) -> dict:
    return asdict(DashboardHandler(container.order_repo, container.product_repo).handle())


@admin_router.get("/orders")
def all_orders(container: Container = Depends(get_container)) -> list[dict]:
    handler = ListAllOrdersHandler(container.order_repo, container.user_repo)
    return [asdict(o) for o in handler.handle(include_user_detail=True)]


# ---------------------------------------------------------------------------
# Delivery Router
# ---------------------------------------------------------------------------
delivery_router = APIRouter(
    prefix="/delivery", tags=["delivery"], dependencies=[Depends(delivery_admin_only)]
)


@delivery_router.get("/orders")
def delivery_orders(container: Container = Depends(get_container)) -> list[dict]:
    handler = ListAllOrdersHandler(container.order_repo, container.user_repo)
    return [asdict(o) for o in handler.handle(include_user_detail=False)]


@delivery_router.put("/orders/{order_id}/status")
def set_delivery_status(
    order_id: str,
    body: StatusUpdateRequest,
    container: Container = Depends(get_container),
) -> dict:
    handler = SetDeliveryStatusHandler(container.order_repo)
    return asdict(handler.handle(order_id, body.new_status))
