"""
Access-token helpers.

Tokens are HS256 JWTs whose `sub` claim is the user id. Issuing tokens is
the identity service's job; `build_access_token` exists for local
development and tests.
"""

from __future__ import annotations

import time
from typing import Any

import jwt

from core import settings


class AuthSecurityError(RuntimeError):
    pass


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    return settings.env_str("JWT_SECRET", "dev-change-this-secret")


def jwt_algorithm() -> str:
    return settings.env_str("JWT_ALG", "HS256")


def access_token_expire_minutes() -> int:
    return settings.env_int("ACCESS_TOKEN_EXPIRE_MIN", 15)


def now_epoch_s() -> int:
    return int(time.time())


def build_access_token(*, user_id: str, email: str = "") -> str:
    issued_at = now_epoch_s()
    expires_at = issued_at + (access_token_expire_minutes() * 60)

    payload = {
        "sub": str(user_id),
        "email": email,
        "type": "access",
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, jwt_secret(), algorithms=[jwt_algorithm()])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    token_type = str(payload.get("type") or "").strip().lower()
    if token_type != "access":
        raise AuthSecurityError("Token is not an access token.")

    return payload


def subject_from_access_token(token: str) -> str:
    payload = decode_access_token(token)
    subject = str(payload.get("sub") or "").strip()
    if not subject:
        raise AuthSecurityError("Invalid access token subject.")
    return subject
