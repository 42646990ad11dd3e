from datetime import timedelta

import jwt as pyjwt
import pytest

from app.api.core.config import settings
from app.api.utils import jwt as jwt_utils
from app.api.utils.password import hash_password, verify_password


def test_create_access_token_and_decode():
    token = jwt_utils.create_access_token("user-1", "consultant")
    payload = pyjwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    assert payload["sub"] == "user-1"
    assert payload["role"] == "consultant"
    assert "jti" in payload


def test_decode_token_rejects_expired():
    token = jwt_utils.create_access_token("user-1", "company", expires_delta=timedelta(seconds=-1))
    with pytest.raises(pyjwt.ExpiredSignatureError):
        jwt_utils.decode_token(token)


def test_decode_token_rejects_foreign_signature():
    token = pyjwt.encode({"sub": "user-1"}, "another-secret", algorithm="HS256")
    with pytest.raises(pyjwt.InvalidSignatureError):
        jwt_utils.decode_token(token)


def test_password_hash_roundtrip():
    hashed = hash_password("S3cure-pass!")
    assert hashed != "S3cure-pass!"
    assert verify_password("S3cure-pass!", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_password_handles_garbage_hash():
    assert verify_password("anything", "not-a-bcrypt-hash") is False
