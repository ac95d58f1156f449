"""Product aggregate.

Products live independently of orders. Orders copy the name and price
they need at creation time, so catalog edits never rewrite history.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: str | None
    name: str
    description: str
    price: Money
    image_url: str

    @staticmethod
    def create(name: str, description: str, price: Money, image_url: str) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not description or not description.strip():
            raise ValidationError("Product description is required")
        if not image_url or not image_url.strip():
            raise ValidationError("Product image URL is required")
        return Product(
            id=None,
            name=name.strip(),
            description=description.strip(),
            price=price,
            image_url=image_url.strip(),
        )
