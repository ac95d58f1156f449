"""PyJWT-backed implementation of TokenService.

Tokens are HS256-signed and carry ``{"user": {"id", "isAdmin",
"isDeliveryAdmin"}}`` plus ``iat``/``exp``. Verification accepts HS256
only, so a token signed with any other algorithm (including ``none``)
is rejected.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import jwt

from storefront.domain.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from storefront.domain.model.user import Claim, RoleFlags
from storefront.domain.service.token_service import TokenService

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=1)


class JwtTokenService(TokenService):

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, user_id: str, roles: RoleFlags) -> str:
        now = self._clock()
        payload = {
            "user": {
                "id": user_id,
                "isAdmin": roles.is_admin,
                "isDeliveryAdmin": roles.is_delivery_admin,
            },
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str | None) -> Claim:
        if not token:
            raise MissingTokenError()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError() from None
        except jwt.PyJWTError:
            raise InvalidTokenError() from None
        return self._to_claim(payload)

    @staticmethod
    def _to_claim(payload: dict) -> Claim:
        user = payload.get("user")
        if not isinstance(user, dict):
            raise InvalidTokenError()
        user_id = user.get("id")
        is_admin = user.get("isAdmin", False)
        is_delivery_admin = user.get("isDeliveryAdmin", False)
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError()
        if not isinstance(is_admin, bool) or not isinstance(is_delivery_admin, bool):
            raise InvalidTokenError()
        return Claim(
            user_id=user_id,
            roles=RoleFlags(is_admin=is_admin, is_delivery_admin=is_delivery_admin),
        )
