"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions, and every service
handle is constructed here explicitly and passed down.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from storefront.application.access_control import AccessGuard
from storefront.config import Settings
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher
from storefront.domain.service.payment_gateway import PaymentGateway
from storefront.domain.service.token_service import TokenService
from storefront.infrastructure.payments.razorpay_gateway import RazorpayPaymentGateway
from storefront.infrastructure.payments.sandbox_gateway import SandboxPaymentGateway
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from storefront.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from storefront.infrastructure.security.jwt_token_service import JwtTokenService


@dataclass
class Container:
    settings: Settings
    order_repo: OrderRepository
    user_repo: UserRepository
    product_repo: ProductRepository
    token_service: TokenService
    password_hasher: PasswordHasher
    payment_gateway: PaymentGateway
    guard: AccessGuard


def payment_gateway(settings: Settings) -> PaymentGateway:
    if settings.payment_backend == "sandbox":
        return SandboxPaymentGateway()
    return RazorpayPaymentGateway(
        key_id=settings.razorpay_key_id,  # type: ignore[arg-type]
        key_secret=settings.razorpay_key_secret,  # type: ignore[arg-type]
        timeout=settings.payment_timeout_seconds,
    )


def build_container(settings: Settings) -> Container:
    data_dir = settings.data_dir
    user_repo = JsonUserRepository(data_dir / "users.json")
    token_service = JwtTokenService(
        settings.jwt_secret, ttl=timedelta(seconds=settings.token_ttl_seconds)
    )
    return Container(
        settings=settings,
        order_repo=JsonOrderRepository(data_dir / "orders.json"),
        user_repo=user_repo,
        product_repo=JsonProductRepository(data_dir / "products.json"),
        token_service=token_service,
        password_hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
        payment_gateway=payment_gateway(settings),
        guard=AccessGuard(
            token_service, user_repo=user_repo, strict_roles=settings.strict_role_check
        ),
    )
