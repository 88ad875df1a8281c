from datetime import timedelta

import pytest
from jose import jwt

from edulearn.core.config import get_settings
from edulearn.core.identity import AdminIdentity, UserIdentity
from edulearn.core.security import (
    InvalidToken,
    MalformedToken,
    create_admin_token,
    create_user_token,
    decode_token,
    hash_password,
    verify_password,
)


def _sign(payload):
    settings = get_settings()
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def test_password_hash_roundtrip():
    hashed = hash_password("admin123")
    assert hashed != "admin123"
    assert verify_password("admin123", hashed)
    assert not verify_password("wrong", hashed)


def test_user_token_resolves_to_user_identity():
    identity = decode_token(create_user_token(7))
    assert identity == UserIdentity(id=7)
    assert identity.is_admin is False


def test_admin_token_resolves_to_admin_identity():
    identity = decode_token(create_admin_token(3))
    assert identity == AdminIdentity(id=3, is_admin=True)


def test_admin_claim_without_flag_is_not_admin():
    identity = decode_token(_sign({"admin": {"id": 3}}))
    assert isinstance(identity, AdminIdentity)
    assert identity.is_admin is False


def test_token_without_identity_claim_is_malformed():
    with pytest.raises(MalformedToken):
        decode_token(_sign({"role": "admin"}))


def test_user_claim_without_id_is_malformed():
    with pytest.raises(MalformedToken):
        decode_token(_sign({"user": {}}))


def test_expired_token_is_invalid():
    token = create_user_token(1, expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidToken):
        decode_token(token)


def test_token_signed_with_other_key_is_invalid():
    token = jwt.encode({"user": {"id": 1}}, "another-secret", algorithm="HS256")
    with pytest.raises(InvalidToken):
        decode_token(token)


def test_garbage_token_is_invalid():
    with pytest.raises(InvalidToken):
        decode_token("not-a-jwt")
