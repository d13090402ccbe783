import time

import pytest
from jose import JWTError, jwt
from pydantic import ValidationError

from travelvibe.core.config import settings
from travelvibe.core.security import (
    ALGO, create_access_token, decode_token, hash_password, read_identity, verify_password,
)


def test_password_hash_is_salted_and_verifiable():
    first = hash_password("hunter22")
    second = hash_password("hunter22")
    assert first != second
    assert "hunter22" not in first
    assert verify_password("hunter22", first)
    assert not verify_password("hunter23", first)


def test_token_carries_identity_claims():
    claims = decode_token(create_access_token("u-1", "a@example.com", "ADMIN"))
    assert (claims["id"], claims["email"], claims["role"]) == ("u-1", "a@example.com", "ADMIN")


def test_token_expires_in_24_hours_by_default():
    before = int(time.time())
    claims = decode_token(create_access_token("u-1", "a@example.com", "USER"))
    day = 24 * 3600
    assert before + day - 5 <= claims["exp"] <= int(time.time()) + day + 5


def test_expired_token_is_rejected():
    with pytest.raises(JWTError):
        decode_token(create_access_token("u-1", "a@example.com", "USER", expires_minutes=-5))


def test_tampered_token_is_rejected():
    token = create_access_token("u-1", "a@example.com", "USER")
    header, payload, signature = token.split(".")
    with pytest.raises(JWTError):
        decode_token(".".join([header, payload, signature[::-1]]))


def test_read_identity_returns_caller():
    caller = read_identity(create_access_token("u-7", "b@example.com", "ADMIN"))
    assert (caller.id, caller.email, caller.is_admin) == ("u-7", "b@example.com", True)


def test_read_identity_requires_all_claims():
    token = jwt.encode({"id": "u-7", "email": "b@example.com"}, settings.SECRET_KEY, algorithm=ALGO)
    with pytest.raises(ValidationError):
        read_identity(token)
