"""Tests for the bcrypt password hasher."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher


@pytest.fixture()
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


def test_hash_verifies(hasher):
    hashed = hasher.hash("s3cret")
    assert hashed != "s3cret"
    assert hasher.verify("s3cret", hashed)
    assert not hasher.verify("wrong", hashed)


def test_hashes_are_salted(hasher):
    assert hasher.hash("s3cret") != hasher.hash("s3cret")


def test_garbage_hash_does_not_verify(hasher):
    assert not hasher.verify("s3cret", "not-a-bcrypt-hash")


def test_overlong_password_rejected(hasher):
    with pytest.raises(ValidationError, match="72 bytes"):
        hasher.hash("x" * 73)
