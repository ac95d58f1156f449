"""Port for the external payment gateway.

The ledger only needs one thing from the gateway: an opaque session
handle for a given amount. Everything else about the gateway protocol
stays behind this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class PaymentSession:
    id: str
    amount: int  # smallest currency unit
    currency: str
    receipt: str


class PaymentGateway(ABC):

    @abstractmethod
    def create_session(self, amount: Money, receipt: str) -> PaymentSession:
        """Allocate a payment session for *amount*.

        Raises PaymentInitError on any failure, including timeouts.
        """
