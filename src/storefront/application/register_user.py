"""Application services: create user records.

``RegisterUserHandler`` is the public sign-up path and always creates a
plain customer. ``ProvisionUserHandler`` is the operator path used by
the CLI to create staff accounts with role flags.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import AuthResultDTO, UserSummaryDTO
from storefront.domain.exceptions import DuplicateEmailError, ValidationError
from storefront.domain.model.user import RoleFlags, User
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher
from storefront.domain.service.token_service import TokenService

logger = structlog.get_logger(__name__)


def normalise_email(email: str) -> str:
    return (email or "").strip().lower()


def _create_user(
    user_repo: UserRepository,
    hasher: PasswordHasher,
    name: str,
    email: str,
    password: str,
    roles: RoleFlags,
) -> User:
    if not name or not name.strip():
        raise ValidationError("Name is required")
    email = normalise_email(email)
    if "@" not in email:
        raise ValidationError("A valid email is required")
    if not password:
        raise ValidationError("Password is required")

    if user_repo.get_by_email(email) is not None:
        raise DuplicateEmailError()

    user = User(
        id=user_repo.next_id(),
        name=name.strip(),
        email=email,
        password_hash=hasher.hash(password),
        roles=roles,
    )
    user_repo.add(user)
    logger.info(
        "User created",
        user_id=user.id,
        is_admin=roles.is_admin,
        is_delivery_admin=roles.is_delivery_admin,
    )
    return user


class RegisterUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._token_service = token_service

    def handle(self, name: str, email: str, password: str) -> AuthResultDTO:
        user = _create_user(
            self._user_repo, self._hasher, name, email, password, RoleFlags()
        )
        return AuthResultDTO(
            token=self._token_service.issue(user.id, user.roles),
            user_id=user.id,
            is_admin=user.roles.is_admin,
            is_delivery_admin=user.roles.is_delivery_admin,
        )


class ProvisionUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(
        self,
        name: str,
        email: str,
        password: str,
        is_admin: bool = False,
        is_delivery_admin: bool = False,
    ) -> UserSummaryDTO:
        user = _create_user(
            self._user_repo,
            self._hasher,
            name,
            email,
            password,
            RoleFlags(is_admin=is_admin, is_delivery_admin=is_delivery_admin),
        )
        return UserSummaryDTO(id=user.id, name=user.name, email=user.email)
