"""Razorpay implementation of PaymentGateway.

Creates a Razorpay "order" (their name for a payment session) over the
REST API. Every failure mode, including a timeout, surfaces as
PaymentInitError; no retries are attempted.
"""

from __future__ import annotations

import requests
import structlog

from storefront.domain.exceptions import PaymentInitError
from storefront.domain.model.value_objects import Money
from storefront.domain.service.payment_gateway import PaymentGateway, PaymentSession

logger = structlog.get_logger(__name__)

RAZORPAY_ORDERS_URL = "https://api.razorpay.com/v1/orders"


class RazorpayPaymentGateway(PaymentGateway):

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
        url: str = RAZORPAY_ORDERS_URL,
    ) -> None:
        self._auth = (key_id, key_secret)
        self._timeout = timeout
        self._http = session or requests.Session()
        self._url = url

    def create_session(self, amount: Money, receipt: str) -> PaymentSession:
        body = {
            "amount": amount.to_minor_units(),
            "currency": amount.currency,
            "receipt": receipt,
        }
        try:
            response = self._http.post(
                self._url, json=body, auth=self._auth, timeout=self._timeout
            )
        except requests.Timeout:
            logger.warning("Payment gateway timed out", timeout=self._timeout)
            raise PaymentInitError("Payment gateway timed out") from None
        except requests.RequestException as exc:
            logger.warning("Payment gateway unreachable", error=str(exc))
            raise PaymentInitError("Payment gateway unreachable") from None

        if not response.ok:
            logger.warning(
                "Payment gateway rejected session request",
                status_code=response.status_code,
            )
            raise PaymentInitError(
                f"Payment gateway returned HTTP {response.status_code}"
            )

        try:
            payload = response.json()
            return PaymentSession(
                id=str(payload["id"]),
                amount=int(payload.get("amount", body["amount"])),
                currency=payload.get("currency", body["currency"]),
                receipt=payload.get("receipt", receipt),
            )
        except (ValueError, KeyError, TypeError):
            logger.warning("Malformed payment gateway response")
            raise PaymentInitError("Malformed payment gateway response") from None
