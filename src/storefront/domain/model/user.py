"""User records and the identity claim carried by tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    ADMIN = "admin"
    DELIVERY_ADMIN = "delivery-admin"


@dataclass(frozen=True)
class RoleFlags:
    is_admin: bool = False
    is_delivery_admin: bool = False

    def grants(self, role: Role) -> bool:
        if role is Role.ADMIN:
            return self.is_admin
        return self.is_delivery_admin


@dataclass
class User:
    """A registered customer or staff member.

    Role flags are fixed when the user is created.
    """

    id: str
    name: str
    email: str
    password_hash: str
    roles: RoleFlags = RoleFlags()


@dataclass(frozen=True)
class Claim:
    """Verified payload of an authentication token.

    ``roles`` is a snapshot taken when the token was issued.
    """

    user_id: str
    roles: RoleFlags
