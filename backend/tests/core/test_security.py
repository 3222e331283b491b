from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from royale_decks.core.security import InvalidTokenError, PasswordHasher, TokenService

SECRET = "unit-test-secret"


def test_password_hash_round_trip(password_hasher: PasswordHasher) -> None:
    hashed = password_hasher.hash("devdev")

    assert hashed != "devdev"
    assert password_hasher.verify(hashed, "devdev") is True
    assert password_hasher.verify(hashed, "wrong") is False


def test_password_hashes_are_salted(password_hasher: PasswordHasher) -> None:
    assert password_hasher.hash("devdev") != password_hasher.hash("devdev")


def test_verify_rejects_garbage_hash(password_hasher: PasswordHasher) -> None:
    assert password_hasher.verify("not-an-argon2-hash", "devdev") is False


def test_low_cost_hash_needs_rehash_with_default_parameters(
    password_hasher: PasswordHasher,
) -> None:
    hashed = password_hasher.hash("devdev")

    assert PasswordHasher().needs_rehash(hashed) is True
    assert password_hasher.needs_rehash(hashed) is False


def test_token_round_trip_carries_user_id() -> None:
    service = TokenService(SECRET)

    token, expires_at = service.create_access_token(42)

    assert service.decode_user_id(token) == 42
    assert expires_at - datetime.now(timezone.utc) > timedelta(days=6)


def test_token_payload_holds_only_identity_claims() -> None:
    token, _ = TokenService(SECRET).create_access_token(7)

    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert set(payload) == {"sub", "iat", "exp"}
    assert payload["sub"] == "7"


def test_expired_token_rejected() -> None:
    service = TokenService(SECRET, expires_in=timedelta(seconds=-5))
    token, _ = service.create_access_token(1)

    with pytest.raises(InvalidTokenError, match="expired"):
        service.decode_user_id(token)


def test_token_signed_with_other_secret_rejected() -> None:
    token, _ = TokenService("another-secret").create_access_token(1)

    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).decode_user_id(token)


def test_malformed_token_rejected() -> None:
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).decode_user_id("definitely.not.a-jwt")


def test_token_without_subject_rejected() -> None:
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"exp": exp}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).decode_user_id(token)


def test_token_with_non_numeric_subject_rejected() -> None:
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "abc", "exp": exp}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError, match="malformed"):
        TokenService(SECRET).decode_user_id(token)
