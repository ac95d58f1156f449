"""Integration tests for the CreateOrder use case.

Uses in-memory fakes, no file I/O or network.
"""

from decimal import Decimal

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import CartItemSpec
from storefront.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    PaymentInitError,
    ValidationError,
)
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakePaymentGateway, FakeProductRepository


def _product(product_id: str, price: str) -> Product:
    return Product(product_id, f"Item {product_id}", "desc", Money.of(price), "img.jpg")


def _setup(
    *prices: str,
    fail_payment: bool = False,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakePaymentGateway]:
    """Handler over a catalog holding products p1..pN at *prices*."""
    products = FakeProductRepository(
        [_product(f"p{i}", price) for i, price in enumerate(prices or ("10",), start=1)]
    )
    order_repo = FakeOrderRepository()
    gateway = FakePaymentGateway(fail=fail_payment)
    return CreateOrderHandler(order_repo, products, gateway), order_repo, gateway


def _cart(*quantities: int) -> list[CartItemSpec]:
    return [
        CartItemSpec(product_id=f"p{i}", quantity=qty)
        for i, qty in enumerate(quantities, start=1)
    ]


class TestPayPath:

    def test_lands_in_processing_with_session(self):
        handler, order_repo, _ = _setup("10")
        result = handler.handle("u1", _cart(2), with_payment=True)

        assert result.order.status == "Processing"
        assert result.order.total_price == "20"
        assert result.payment_session is not None
        assert result.order.payment_session_id == result.payment_session.id

        saved = order_repo.get_by_id(result.order.id)
        assert saved.status == OrderStatus.PROCESSING
        assert saved.payment_session_id == result.payment_session.id

    def test_gateway_gets_total_and_receipt(self):
        handler, _, gateway = _setup("10", "5.50")
        result = handler.handle("u1", _cart(2, 1), with_payment=True)

        amount, receipt = gateway.calls[0]
        assert amount == Money.of("25.50")
        assert receipt == "receipt_u1"
        assert result.payment_session.amount == 2550
        assert result.payment_session.currency == "INR"

    def test_gateway_failure_writes_nothing(self):
        handler, order_repo, gateway = _setup("10", fail_payment=True)
        with pytest.raises(PaymentInitError):
            handler.handle("u1", _cart(2), with_payment=True)
        assert len(gateway.calls) == 1
        assert len(order_repo) == 0
        assert order_repo.save_calls == 0


class TestDirectPath:

    def test_lands_in_pending_without_gateway(self):
        handler, order_repo, gateway = _setup("10")
        result = handler.handle("u1", _cart(2))

        assert result.order.status == "Pending"
        assert result.payment_session is None
        assert gateway.calls == []
        assert order_repo.get_by_id(result.order.id).status == OrderStatus.PENDING


class TestCatalogSnapshot:

    def test_name_and_price_come_from_catalog(self):
        handler, _, _ = _setup("10")
        spec = CartItemSpec(product_id="p1", quantity=1, name="Gold bar", price="10.00")
        item = handler.handle("u1", [spec]).order.items[0]
        assert item.name == "Item p1"
        assert Decimal(item.price) == Decimal("10")

    def test_unknown_product_rejected_before_gateway(self):
        handler, order_repo, gateway = _setup("10")
        spec = CartItemSpec(product_id="does-not-exist", quantity=1, price="0.01")
        with pytest.raises(EntityNotFoundError, match="does-not-exist"):
            handler.handle("u1", [spec], with_payment=True)
        assert gateway.calls == []
        assert len(order_repo) == 0

    def test_client_price_differing_from_catalog_rejected(self):
        handler, order_repo, gateway = _setup("10")
        spec = CartItemSpec(product_id="p1", quantity=1, price="0.01")
        with pytest.raises(ValidationError, match="Price of 'Item p1' is 10"):
            handler.handle("u1", [spec], with_payment=True)
        assert gateway.calls == []
        assert len(order_repo) == 0

    def test_later_catalog_change_does_not_touch_order(self):
        products = FakeProductRepository([_product("p1", "10")])
        order_repo = FakeOrderRepository()
        handler = CreateOrderHandler(order_repo, products, FakePaymentGateway())
        order_id = handler.handle("u1", _cart(2)).order.id

        products.save(_product("p1", "99"))

        assert order_repo.get_by_id(order_id).total_price == Money.of("20")


class TestTotals:

    @pytest.mark.parametrize(
        "prices, quantities, expected",
        [
            (("10",), (2,), Decimal("20")),
            (("0.10", "0.20"), (3, 1), Decimal("0.50")),
            (("199.99", "0", "1.01"), (1, 4, 7), Decimal("207.06")),
        ],
    )
    def test_total_equals_sum_of_lines(self, prices, quantities, expected):
        handler, _, _ = _setup(*prices)
        result = handler.handle("u1", _cart(*quantities))
        assert Decimal(result.order.total_price) == expected

    def test_matching_client_total_accepted(self):
        handler, _, _ = _setup("10")
        result = handler.handle("u1", _cart(2), total_price="20.00")
        assert Decimal(result.order.total_price) == Decimal("20")

    def test_mismatched_client_total_rejected(self):
        handler, order_repo, gateway = _setup("10")
        with pytest.raises(ValidationError, match="does not match"):
            handler.handle("u1", _cart(2), total_price="5", with_payment=True)
        assert gateway.calls == []
        assert len(order_repo) == 0


class TestValidation:

    @pytest.mark.parametrize("with_payment", [True, False])
    def test_empty_cart_rejected(self, with_payment):
        handler, order_repo, gateway = _setup()
        with pytest.raises(EmptyCartError):
            handler.handle("u1", [], with_payment=with_payment)
        assert len(order_repo) == 0
        assert gateway.calls == []

    def test_non_positive_quantity_rejected(self):
        handler, _, gateway = _setup("10")
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle("u1", _cart(0), with_payment=True)
        assert gateway.calls == []

    def test_negative_client_total_rejected(self):
        handler, _, _ = _setup("10")
        with pytest.raises(ValidationError, match="cannot be negative"):
            handler.handle("u1", _cart(1), total_price="-1")
