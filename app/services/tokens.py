"""JWT creation and verification for logged-in customers."""
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.config import Settings


def create_access_token(username: str, settings: Settings, issued_at: datetime | None = None) -> str:
    """Sign a token for ``username`` expiring ``token_ttl_seconds`` after issuance."""
    now = issued_at or datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": username,
        "iat": now,
        "exp": now + timedelta(seconds=settings.token_ttl_seconds),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Verify signature and expiry; return the payload (sub, iat, exp).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "iat", "exp"]},
    )
