"""Offline PaymentGateway for local development.

Allocates Razorpay-shaped session ids without any network access.
"""

from __future__ import annotations

import uuid

from storefront.domain.model.value_objects import Money
from storefront.domain.service.payment_gateway import PaymentGateway, PaymentSession


class SandboxPaymentGateway(PaymentGateway):

    def create_session(self, amount: Money, receipt: str) -> PaymentSession:
        return PaymentSession(
            id=f"order_{uuid.uuid4().hex[:14]}",
            amount=amount.to_minor_units(),
            currency=amount.currency,
            receipt=receipt,
        )
