"""Port for minting and verifying identity tokens."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import Claim, RoleFlags


class TokenService(ABC):

    @abstractmethod
    def issue(self, user_id: str, roles: RoleFlags) -> str:
        """Return a signed, time-limited token carrying *user_id* and *roles*."""

    @abstractmethod
    def verify(self, token: str | None) -> Claim:
        """Return the claim inside *token*.

        Raises MissingTokenError, InvalidTokenError or ExpiredTokenError.
        """
