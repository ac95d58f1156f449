"""Application service: Add Product use case (admins)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(
        self, product_repo: ProductRepository, currency: str = DEFAULT_CURRENCY
    ) -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self, name: str, description: str, price: str | int | float, image_url: str
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name,
            description=description,
            price=Money.of(price, self._currency),
            image_url=image_url,
        )
        self._product_repo.save(product)
        return product_to_dto(product)
