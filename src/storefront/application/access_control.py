"""Access control guard.

Every gated operation goes through the same gates, in order:

1. the token must be present, well-formed, correctly signed and unexpired;
2. if a role is required, the claim must grant it.

Gates short-circuit. Ownership of an order is the third gate and is
checked by the Order aggregate itself (see ``Order.cancel``).

By default the role flags come from the token, so a role change takes
effect only when the user's current token expires. With
``strict_roles`` the flags are re-read from the user store on every
privileged request instead.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import AccessDeniedError, AuthError, InvalidTokenError
from storefront.domain.model.user import Claim, Role
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.token_service import TokenService

logger = structlog.get_logger(__name__)

ROLE_DENIED_MESSAGES = {
    Role.ADMIN: "Admin access required",
    Role.DELIVERY_ADMIN: "Delivery Admin access required",
}


class AccessGuard:

    def __init__(
        self,
        token_service: TokenService,
        user_repo: UserRepository | None = None,
        strict_roles: bool = False,
    ) -> None:
        if strict_roles and user_repo is None:
            raise ValueError("strict_roles requires a user repository")
        self._token_service = token_service
        self._user_repo = user_repo
        self._strict_roles = strict_roles

    def authenticate(self, token: str | None) -> Claim:
        try:
            return self._token_service.verify(token)
        except AuthError as exc:
            logger.info("Authentication failed", reason=type(exc).__name__)
            raise

    def authorize(self, token: str | None, role: Role | None = None) -> Claim:
        """Run the token gate and, when *role* is given, the role gate."""
        claim = self.authenticate(token)
        if role is None:
            return claim

        if self._strict_roles:
            claim = self._refresh(claim)

        if not claim.roles.grants(role):
            logger.info("Access denied", user_id=claim.user_id, required=role.value)
            raise AccessDeniedError(ROLE_DENIED_MESSAGES[role])
        return claim

    def _refresh(self, claim: Claim) -> Claim:
        user = self._user_repo.get_by_id(claim.user_id)  # type: ignore[union-attr]
        if user is None:
            raise InvalidTokenError()
        return Claim(user_id=user.id, roles=user.roles)
