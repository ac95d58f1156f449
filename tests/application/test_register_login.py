"""Tests for registration, login and operator provisioning."""

import pytest

from storefront.application.login_user import LoginHandler
from storefront.application.register_user import ProvisionUserHandler, RegisterUserHandler
from storefront.domain.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    ValidationError,
)
from storefront.infrastructure.security.jwt_token_service import JwtTokenService
from tests.fakes import FakePasswordHasher, FakeUserRepository

SECRET = "test-secret-that-is-long-enough-for-hs256"


@pytest.fixture()
def deps():
    return FakeUserRepository(), FakePasswordHasher(), JwtTokenService(SECRET)


class TestRegister:

    def test_returns_token_for_plain_customer(self, deps):
        users, hasher, tokens = deps
        result = RegisterUserHandler(users, hasher, tokens).handle(
            "Alice", "Alice@Example.com ", "pw"
        )
        assert result.is_admin is False
        assert result.is_delivery_admin is False

        claim = tokens.verify(result.token)
        assert claim.user_id == result.user_id
        assert users.get_by_email("alice@example.com").name == "Alice"

    def test_password_is_hashed(self, deps):
        users, hasher, tokens = deps
        result = RegisterUserHandler(users, hasher, tokens).handle("A", "a@x.io", "pw")
        assert users.get_by_id(result.user_id).password_hash != "pw"

    def test_duplicate_email_rejected(self, deps):
        handler = RegisterUserHandler(*deps)
        handler.handle("Alice", "alice@example.com", "pw")
        with pytest.raises(DuplicateEmailError, match="User already exists"):
            handler.handle("Other", "ALICE@example.com", "pw2")

    @pytest.mark.parametrize(
        "name, email, password, message",
        [
            ("", "a@x.io", "pw", "Name is required"),
            ("A", "not-an-email", "pw", "valid email"),
            ("A", "a@x.io", "", "Password is required"),
        ],
    )
    def test_validation(self, deps, name, email, password, message):
        with pytest.raises(ValidationError, match=message):
            RegisterUserHandler(*deps).handle(name, email, password)


class TestLogin:

    def test_valid_credentials(self, deps):
        users, hasher, tokens = deps
        registered = RegisterUserHandler(users, hasher, tokens).handle("A", "a@x.io", "pw")
        result = LoginHandler(users, hasher, tokens).handle("A@X.io", "pw")
        assert result.user_id == registered.user_id
        assert tokens.verify(result.token).user_id == registered.user_id

    def test_wrong_password(self, deps):
        users, hasher, tokens = deps
        RegisterUserHandler(users, hasher, tokens).handle("A", "a@x.io", "pw")
        with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
            LoginHandler(users, hasher, tokens).handle("a@x.io", "nope")

    def test_unknown_email(self, deps):
        with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
            LoginHandler(*deps).handle("ghost@x.io", "pw")

    def test_token_carries_provisioned_roles(self, deps):
        users, hasher, tokens = deps
        ProvisionUserHandler(users, hasher).handle(
            "Ops", "ops@x.io", "pw", is_delivery_admin=True
        )
        result = LoginHandler(users, hasher, tokens).handle("ops@x.io", "pw")
        assert result.is_delivery_admin is True
        assert result.is_admin is False
        assert tokens.verify(result.token).roles.is_delivery_admin is True
