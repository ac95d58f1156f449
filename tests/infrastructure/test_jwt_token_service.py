"""Tests for the PyJWT token service."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from storefront.domain.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from storefront.domain.model.user import RoleFlags
from storefront.infrastructure.security.jwt_token_service import JwtTokenService

SECRET = "test-secret-that-is-long-enough-for-hs256"
OTHER_SECRET = "another-secret-that-is-long-enough-too"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TestIssueAndVerify:

    def test_round_trip_keeps_id_and_flags(self):
        service = JwtTokenService(SECRET)
        token = service.issue("u1", RoleFlags(is_admin=True))
        claim = service.verify(token)
        assert claim.user_id == "u1"
        assert claim.roles == RoleFlags(is_admin=True, is_delivery_admin=False)

    def test_expires_one_hour_after_issue(self):
        issued_at = datetime(2030, 1, 1, tzinfo=timezone.utc)
        token = JwtTokenService(SECRET, clock=lambda: issued_at).issue("u1", RoleFlags())
        payload = jwt.decode(token, options={"verify_signature": False})
        assert payload["exp"] - payload["iat"] == 3600

    def test_payload_shape(self):
        token = JwtTokenService(SECRET).issue("u1", RoleFlags(is_delivery_admin=True))
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["user"] == {"id": "u1", "isAdmin": False, "isDeliveryAdmin": True}


class TestRejections:

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing(self, token):
        with pytest.raises(MissingTokenError):
            JwtTokenService(SECRET).verify(token)

    def test_expired(self):
        stale = JwtTokenService(SECRET, clock=lambda: _now() - timedelta(hours=1, seconds=5))
        token = stale.issue("u1", RoleFlags(is_admin=True))
        with pytest.raises(ExpiredTokenError):
            JwtTokenService(SECRET).verify(token)

    def test_wrong_key(self):
        token = JwtTokenService(OTHER_SECRET).issue("u1", RoleFlags())
        with pytest.raises(InvalidTokenError):
            JwtTokenService(SECRET).verify(token)

    def test_other_hmac_algorithm(self):
        token = jwt.encode(
            {"user": {"id": "u1"}, "iat": _now(), "exp": _now() + timedelta(hours=1)},
            SECRET,
            algorithm="HS512",
        )
        with pytest.raises(InvalidTokenError):
            JwtTokenService(SECRET).verify(token)

    def test_unsigned_token(self):
        token = jwt.encode(
            {"user": {"id": "u1", "isAdmin": True}, "iat": _now(), "exp": _now() + timedelta(hours=1)},
            None,
            algorithm="none",
        )
        with pytest.raises(InvalidTokenError):
            JwtTokenService(SECRET).verify(token)

    def test_tampered_payload(self):
        token = JwtTokenService(SECRET).issue("u1", RoleFlags())
        header, _, signature = token.split(".")
        forged = jwt.encode(
            {"user": {"id": "u1", "isAdmin": True}, "iat": _now(), "exp": _now() + timedelta(hours=1)},
            OTHER_SECRET,
            algorithm="HS256",
        ).split(".")[1]
        with pytest.raises(InvalidTokenError):
            JwtTokenService(SECRET).verify(f"{header}.{forged}.{signature}")

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"user": "u1"},
            {"user": {"isAdmin": True}},
            {"user": {"id": "u1", "isAdmin": "yes"}},
        ],
    )
    def test_malformed_claims(self, payload):
        token = jwt.encode(
            {**payload, "iat": _now(), "exp": _now() + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            JwtTokenService(SECRET).verify(token)

    def test_missing_expiry(self):
        token = jwt.encode({"user": {"id": "u1"}, "iat": _now()}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            JwtTokenService(SECRET).verify(token)
