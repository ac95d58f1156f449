"""FastAPI dependencies: the service container and the access gates.

One dependency factory covers every role requirement, so customer,
admin and delivery-admin routes share the same gate code.
"""

from __future__ import annotations

from collections.abc import Callable

from fastapi import Depends, Header, Request

from storefront.domain.model.user import Claim, Role
from storefront.infrastructure.bootstrap import Container

AUTH_HEADER = "x-auth-token"


def get_container(request: Request) -> Container:
    return request.app.state.container


def require(role: Role | None = None) -> Callable[..., Claim]:
    """Build a dependency that verifies the token and, optionally, a role."""

    def dependency(
        container: Container = Depends(get_container),
        token: str | None = Header(default=None, alias=AUTH_HEADER),
    ) -> Claim:
        return container.guard.authorize(token, role)

    return dependency


authenticated = require()
admin_only = require(Role.ADMIN)
delivery_admin_only = require(Role.DELIVERY_ADMIN)
