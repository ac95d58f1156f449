"""Application services: order listings (queries).

Listings are plain snapshots of the ledger at call time, newest first.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.user_repository import UserRepository


class ListUserOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str) -> list[OrderDTO]:
        return [order_to_dto(order) for order in self._order_repo.list_by_user(user_id)]


class ListAllOrdersHandler:

    def __init__(self, order_repo: OrderRepository, user_repo: UserRepository) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo

    def handle(self, include_user_detail: bool = False) -> list[OrderDTO]:
        """Return every order; optionally resolve each owner's name and email."""
        orders = self._order_repo.list_all()
        if not include_user_detail:
            return [order_to_dto(order) for order in orders]

        users: dict[str, User | None] = {}
        result: list[OrderDTO] = []
        for order in orders:
            if order.user_id not in users:
                users[order.user_id] = self._user_repo.get_by_id(order.user_id)
            result.append(order_to_dto(order, users[order.user_id]))
        return result
