"""Tests for aipromote/core/security.py - password hashing and tokens."""

from aipromote.core.security import (
    generate_account_token,
    get_password_hash,
    verify_password,
)


def test_hash_and_verify():
    hashed = get_password_hash("s3cret-password")

    assert hashed != "s3cret-password"
    assert hashed.startswith("$2b$")
    assert verify_password("s3cret-password", hashed) is True
    assert verify_password("wrong-password", hashed) is False


def test_verify_without_hash():
    """Test a missing hash never verifies."""
    assert verify_password("anything", None) is False


def test_generate_account_token():
    token = generate_account_token()

    assert len(token) == 64
    int(token, 16)
    assert generate_account_token() != token
