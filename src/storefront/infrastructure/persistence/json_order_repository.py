"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import ConcurrentModificationError, ValidationError
from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return self._newest_first(self._to_domain(raw) for raw in self._file.load())

    def list_by_user(self, user_id: str) -> list[Order]:
        return self._newest_first(
            self._to_domain(raw) for raw in self._file.load() if raw["user_id"] == user_id
        )

    def save(self, order: Order) -> None:
        with self._file.locked():
            orders = self._file.load()

            if order.id is None:
                order.id = self.next_id()

            # Upsert with an optimistic version check
            index = None
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    index = i
                    break

            stored_version = orders[index].get("version", 0) if index is not None else 0
            if stored_version != order.version:
                raise ConcurrentModificationError(
                    f"Order {order.id} was modified concurrently "
                    f"(expected version {order.version}, found {stored_version})"
                )
            if index is not None and orders[index]["user_id"] != order.user_id:
                raise ValidationError("The owner of an order cannot change")

            raw = self._to_raw(order)
            raw["version"] = order.version + 1
            if index is None:
                orders.append(raw)
            else:
                orders[index] = raw

            self._file.persist(orders)
            order.version += 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        total = order.total_price
        return {
            "id": order.id,
            "user_id": order.user_id,
            "payment_session_id": order.payment_session_id,
            "status": order.status.value,
            "total_price": str(total.amount),
            "currency": total.currency,
            "created_at": order.created_at.isoformat(),
            "version": order.version,
            "items": [
                {
                    "product_id": item.product_id,
                    "name": item.name,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                    "currency": item.price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                product_id=i["product_id"],
                name=i["name"],
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(i["price"]), i["currency"]),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            items=items,
            status=OrderStatus(raw["status"]),
            payment_session_id=raw.get("payment_session_id"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            version=raw.get("version", 0),
        )

    @staticmethod
    def _newest_first(orders) -> list[Order]:
        return sorted(orders, key=lambda o: o.created_at, reverse=True)
