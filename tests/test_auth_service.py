"""Tests for password hashing and token handling."""

import pytest
from jose import jwt

from src.config import Settings, get_settings
from src.exceptions import InvalidToken
from src.services.auth import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_is_salted():
    """Test hashing the same password twice gives different digests."""
    first = get_password_hash("salainen")
    second = get_password_hash("salainen")
    assert first != second
    assert verify_password("salainen", first)
    assert verify_password("salainen", second)


def test_verify_wrong_password():
    """Test verification fails for the wrong password."""
    digest = get_password_hash("salainen")
    assert not verify_password("salainen2", digest)


def test_default_bcrypt_cost():
    """Test the default work factor."""
    assert Settings.model_fields["bcrypt_rounds"].default == 10


def test_token_round_trip():
    """Test a freshly issued token decodes to its user id."""
    token = create_access_token(42, "root")
    assert decode_access_token(token) == 42


def test_token_carries_username_and_expiry():
    """Test the claims inside an issued token."""
    settings = get_settings()
    token = create_access_token(7, "mluukkai")
    claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    assert claims["sub"] == "7"
    assert claims["username"] == "mluukkai"
    assert "exp" in claims


def test_decode_rejects_bad_signature():
    """Test a token signed with another key is rejected."""
    token = jwt.encode({"sub": "1"}, "another-secret", algorithm="HS256")
    with pytest.raises(InvalidToken):
        decode_access_token(token)


def test_decode_rejects_malformed_token():
    """Test a token that is not a JWT is rejected."""
    with pytest.raises(InvalidToken):
        decode_access_token("definitely.not.valid")


def test_decode_rejects_missing_subject():
    """Test a properly signed token without a subject is rejected."""
    settings = get_settings()
    token = jwt.encode({"username": "root"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    with pytest.raises(InvalidToken):
        decode_access_token(token)


def test_decode_rejects_non_numeric_subject():
    """Test a subject that only looks like a number is rejected."""
    settings = get_settings()
    for subject in ("²", "abc", "1.5"):
        token = jwt.encode({"sub": subject}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
        with pytest.raises(InvalidToken):
            decode_access_token(token)
