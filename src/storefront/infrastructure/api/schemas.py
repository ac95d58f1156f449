"""Pydantic request schemas for the HTTP API.

These are external contracts, kept separate from the application DTOs.
Business validation (empty carts, negative prices, quantities) is left
to the domain so it maps onto the documented status codes.
"""

from decimal import Decimal

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class ProductRequest(BaseModel):
    name: str
    description: str
    price: Decimal
    image_url: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Desk Lamp",
                    "description": "LED lamp with adjustable arm",
                    "price": "1499.00",
                    "image_url": "https://cdn.example.com/lamp.jpg",
                }
            ]
        }
    }


class CartItemSchema(BaseModel):
    product_id: str
    quantity: int
    name: str | None = None
    price: Decimal | None = None


class PlaceOrderRequest(BaseModel):
    cart_items: list[CartItemSchema]
    total_price: Decimal | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "cart_items": [
                        {
                            "product_id": "prod-001",
                            "name": "Desk Lamp",
                            "quantity": 2,
                            "price": "10.00",
                        }
                    ],
                    "total_price": "20.00",
                }
            ]
        }
    }


class StatusUpdateRequest(BaseModel):
    new_status: str
