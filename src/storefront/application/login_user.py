"""Application service: Login use case."""

from __future__ import annotations

from storefront.application.dto import AuthResultDTO
from storefront.application.register_user import normalise_email
from storefront.domain.exceptions import InvalidCredentialsError
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher
from storefront.domain.service.token_service import TokenService


class LoginHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._token_service = token_service

    def handle(self, email: str, password: str) -> AuthResultDTO:
        # Same error for unknown email and wrong password.
        user = self._user_repo.get_by_email(normalise_email(email))
        if user is None or not self._hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return AuthResultDTO(
            token=self._token_service.issue(user.id, user.roles),
            user_id=user.id,
            is_admin=user.roles.is_admin,
            is_delivery_admin=user.roles.is_delivery_admin,
        )
