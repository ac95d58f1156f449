"""Runtime settings, read from the environment once at startup.

The resulting ``Settings`` object is handed to the composition root;
nothing else in the package reads ``os.environ``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class ConfigurationError(Exception):
    """A required setting is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    data_dir: Path = Path("data")
    token_ttl_seconds: int = 3600
    payment_backend: str = "razorpay"
    razorpay_key_id: str | None = None
    razorpay_key_secret: str | None = None
    currency: str = "INR"
    payment_timeout_seconds: float = 10.0
    strict_role_check: bool = False
    bcrypt_rounds: int = 10
    log_level: str = "INFO"
    log_json: bool = False

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        secret = env.get("JWT_SECRET")
        if not secret:
            raise ConfigurationError("JWT_SECRET must be set")

        backend = env.get("PAYMENT_BACKEND", "razorpay").strip().lower()
        if backend not in ("razorpay", "sandbox"):
            raise ConfigurationError(
                f"PAYMENT_BACKEND must be 'razorpay' or 'sandbox', got {backend!r}"
            )
        key_id = env.get("RAZORPAY_KEY_ID")
        key_secret = env.get("RAZORPAY_KEY_SECRET")
        if backend == "razorpay" and not (key_id and key_secret):
            raise ConfigurationError(
                "RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET must be set "
                "for the razorpay payment backend"
            )

        return Settings(
            jwt_secret=secret,
            data_dir=Path(env.get("STOREFRONT_DATA_DIR", "data")),
            token_ttl_seconds=_int(env, "TOKEN_TTL_SECONDS", 3600),
            payment_backend=backend,
            razorpay_key_id=key_id,
            razorpay_key_secret=key_secret,
            currency=env.get("PAYMENT_CURRENCY", "INR").strip().upper(),
            payment_timeout_seconds=_float(env, "PAYMENT_TIMEOUT_SECONDS", 10.0),
            strict_role_check=_bool(env, "STRICT_ROLE_CHECK", False),
            bcrypt_rounds=_int(env, "BCRYPT_ROUNDS", 10),
            log_level=env.get("LOG_LEVEL", "INFO").strip().upper(),
            log_json=_bool(env, "LOG_JSON", False),
        )


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")
