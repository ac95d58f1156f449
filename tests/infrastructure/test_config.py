"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from storefront.config import ConfigurationError, Settings

BASE = {"JWT_SECRET": "s" * 40, "PAYMENT_BACKEND": "sandbox"}


def test_defaults():
    settings = Settings.from_env(BASE)
    assert settings.data_dir == Path("data")
    assert settings.token_ttl_seconds == 3600
    assert settings.currency == "INR"
    assert settings.payment_timeout_seconds == 10.0
    assert settings.strict_role_check is False
    assert settings.log_json is False


def test_overrides():
    settings = Settings.from_env(
        {
            **BASE,
            "STOREFRONT_DATA_DIR": "/srv/store",
            "TOKEN_TTL_SECONDS": "600",
            "PAYMENT_TIMEOUT_SECONDS": "2.5",
            "STRICT_ROLE_CHECK": "yes",
            "PAYMENT_CURRENCY": "usd",
            "LOG_LEVEL": "debug",
        }
    )
    assert settings.data_dir == Path("/srv/store")
    assert settings.token_ttl_seconds == 600
    assert settings.payment_timeout_seconds == 2.5
    assert settings.strict_role_check is True
    assert settings.currency == "USD"
    assert settings.log_level == "DEBUG"


def test_secret_required():
    with pytest.raises(ConfigurationError, match="JWT_SECRET"):
        Settings.from_env({"PAYMENT_BACKEND": "sandbox"})


def test_razorpay_needs_credentials():
    with pytest.raises(ConfigurationError, match="RAZORPAY_KEY_ID"):
        Settings.from_env({"JWT_SECRET": "s" * 40})


def test_razorpay_with_credentials():
    settings = Settings.from_env(
        {"JWT_SECRET": "s" * 40, "RAZORPAY_KEY_ID": "k", "RAZORPAY_KEY_SECRET": "v"}
    )
    assert settings.payment_backend == "razorpay"


def test_unknown_backend():
    with pytest.raises(ConfigurationError, match="PAYMENT_BACKEND"):
        Settings.from_env({**BASE, "PAYMENT_BACKEND": "paypal"})


@pytest.mark.parametrize(
    "name, value",
    [
        ("TOKEN_TTL_SECONDS", "an hour"),
        ("TOKEN_TTL_SECONDS", "0"),
        ("PAYMENT_TIMEOUT_SECONDS", "-1"),
        ("STRICT_ROLE_CHECK", "maybe"),
    ],
)
def test_malformed_values(name, value):
    with pytest.raises(ConfigurationError, match=name):
        Settings.from_env({**BASE, name: value})
