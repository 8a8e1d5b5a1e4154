"""Password hashing and opaque account tokens."""

import secrets

from passlib.context import CryptContext

# bcrypt, 12 rounds.
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=12)

# Verified against when the account does not exist so that a failed sign-in
# costs one bcrypt comparison either way.
_DUMMY_HASH = pwd_context.hash("aipromote-dummy-password")


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password against its hash.

    A missing hash still performs a full comparison and returns False.
    """
    if not hashed_password:
        pwd_context.verify(plain_password, _DUMMY_HASH)
        return False
    return pwd_context.verify(plain_password, hashed_password)


def generate_account_token() -> str:
    """Return a 32-byte random token, hex encoded (64 chars)."""
    return secrets.token_hex(32)
