"""Integration tests for the CancelOrder use case."""

import pytest

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import CartItemSpec
from storefront.domain.exceptions import (
    InvalidOrderStateError,
    NotOrderOwnerError,
    OrderNotFoundError,
)
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakePaymentGateway, FakeProductRepository

LAMP = Product("p1", "Lamp", "LED desk lamp", Money.of("10"), "lamp.jpg")
CART = [CartItemSpec(product_id="p1", quantity=2)]


def _setup(with_payment: bool = True) -> tuple[CancelOrderHandler, FakeOrderRepository, str]:
    order_repo = FakeOrderRepository()
    products = FakeProductRepository([LAMP])
    created = CreateOrderHandler(order_repo, products, FakePaymentGateway()).handle(
        "owner", CART, with_payment=with_payment
    )
    return CancelOrderHandler(order_repo), order_repo, created.order.id


class TestCancelOrder:

    def test_owner_cancels_processing_order(self):
        handler, order_repo, order_id = _setup()
        dto = handler.handle(order_id, "owner")
        assert dto.status == "Canceled"
        assert order_repo.get_by_id(order_id).status == OrderStatus.CANCELED

    def test_owner_cancels_pending_order(self):
        handler, _, order_id = _setup(with_payment=False)
        assert handler.handle(order_id, "owner").status == "Canceled"

    def test_second_cancel_fails(self):
        handler, _, order_id = _setup()
        handler.handle(order_id, "owner")
        with pytest.raises(InvalidOrderStateError):
            handler.handle(order_id, "owner")

    def test_non_owner_rejected_and_order_untouched(self):
        handler, order_repo, order_id = _setup()
        with pytest.raises(NotOrderOwnerError):
            handler.handle(order_id, "someone-else")
        assert order_repo.get_by_id(order_id).status == OrderStatus.PROCESSING

    def test_unknown_order(self):
        handler, _, _ = _setup()
        with pytest.raises(OrderNotFoundError, match="missing"):
            handler.handle("missing", "owner")

    def test_cancel_bumps_version(self):
        handler, order_repo, order_id = _setup()
        before = order_repo.get_by_id(order_id).version
        handler.handle(order_id, "owner")
        assert order_repo.get_by_id(order_id).version == before + 1
