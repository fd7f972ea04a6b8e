from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.config import Settings
from app.services.tokens import create_access_token, decode_access_token

SETTINGS = Settings(jwt_secret="test-secret-for-hs256-signing-0123456789")


def test_token_roundtrip_carries_username_and_one_hour_expiry():
    token = create_access_token("alice", SETTINGS)
    payload = decode_access_token(token, SETTINGS)

    assert payload["sub"] == "alice"
    assert payload["exp"] - payload["iat"] == 3600


def test_expired_token_raises():
    issued = datetime.now(timezone.utc) - timedelta(hours=1, seconds=5)
    token = create_access_token("alice", SETTINGS, issued_at=issued)

    with pytest.raises(jwt.ExpiredSignatureError):
        decode_access_token(token, SETTINGS)


def test_token_from_other_secret_raises():
    token = create_access_token("alice", Settings(jwt_secret="another-secret-for-hs256-signing-012345"))

    with pytest.raises(jwt.InvalidSignatureError):
        decode_access_token(token, SETTINGS)


def test_token_without_expiry_raises():
    token = jwt.encode({"sub": "alice", "iat": 0}, SETTINGS.jwt_secret, algorithm="HS256")

    with pytest.raises(jwt.MissingRequiredClaimError):
        decode_access_token(token, SETTINGS)
