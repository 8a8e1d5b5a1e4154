"""Access token issuing and verification (HS256 JWT by default).

Tokens carry ``sub``/``id``, ``email``, ``role`` and ``verified`` claims plus
``iat`` and ``exp``.
"""

from dataclasses import dataclass
from datetime import timedelta

import jwt as pyjwt

from aipromote.auth.exceptions import (
    InvalidTokenError,
    MalformedAuthHeaderError,
    MissingTokenError,
)
from aipromote.core.mixins import utc_now


@dataclass(frozen=True)
class TokenPrincipal:
    """Identity extracted from a verified access token."""

    id: str
    email: str
    role: str
    verified: bool = False


def create_access_token(
    principal: TokenPrincipal,
    secret: str,
    expires_in: timedelta,
    algorithm: str = "HS256",
) -> str:
    """Sign an access token for ``principal``."""
    issued_at = utc_now()
    payload = {
        "sub": principal.id,
        "id": principal.id,
        "email": principal.email,
        "role": principal.role,
        "verified": principal.verified,
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return pyjwt.encode(payload, secret, algorithm=algorithm)


def verify_token(token: str, secret: str, algorithm: str = "HS256") -> TokenPrincipal:
    """Decode and validate an access token.

    Raises:
        InvalidTokenError: Bad signature, malformed token, expired token or
            missing claims.
    """
    try:
        payload = pyjwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "sub"]},
        )
    except pyjwt.PyJWTError as e:
        raise InvalidTokenError() from e

    email = payload.get("email")
    role = payload.get("role")
    if not email or not role:
        raise InvalidTokenError()

    return TokenPrincipal(
        id=str(payload["sub"]),
        email=email,
        role=role,
        verified=bool(payload.get("verified", False)),
    )


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token part of an ``Authorization: Bearer <token>`` header.

    Raises:
        MissingTokenError: Header absent or blank.
        MalformedAuthHeaderError: Scheme is not Bearer or the token is empty.
    """
    if authorization is None or not authorization.strip():
        raise MissingTokenError()

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise MalformedAuthHeaderError()
    return token.strip()
