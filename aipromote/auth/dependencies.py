"""Auth domain dependencies.

Bearer-token authentication for FastAPI routes: principal extraction,
current user lookup and role guards.
"""

import uuid
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from aipromote.auth.exceptions import (
    InsufficientPermissionsError,
    InvalidTokenError,
)
from aipromote.auth.tokens import TokenPrincipal, extract_bearer_token, verify_token
from aipromote.core.settings import Settings, get_settings
from aipromote.db.engine import get_session
from aipromote.user.exceptions import UserNotFoundError
from aipromote.user.models import User


def get_token_principal(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenPrincipal:
    """Verify the bearer token on the request and return its principal.

    Raises:
        MissingTokenError: No Authorization header
        MalformedAuthHeaderError: Header is not ``Bearer <token>``
        InvalidTokenError: Signature, expiry or claims are invalid
    """
    token = extract_bearer_token(request.headers.get("authorization"))
    principal = verify_token(token, settings.jwt_secret, settings.jwt_algorithm)
    request.state.user_id = principal.id
    return principal


PrincipalDep = Annotated[TokenPrincipal, Depends(get_token_principal)]


def get_current_user(
    principal: PrincipalDep,
    session: Annotated[Session, Depends(get_session)],
) -> User:
    """Load the user behind a verified token.

    Tokens outlive accounts, so the row is re-read on every request.

    Raises:
        InvalidTokenError: Token subject is not a user id
        UserNotFoundError: User no longer exists
    """
    try:
        user_id = uuid.UUID(principal.id)
    except ValueError as e:
        raise InvalidTokenError() from e

    user = session.get(User, user_id)
    if user is None:
        raise UserNotFoundError()
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def require_role(*roles: str) -> Callable[[User], User]:
    """Build a dependency that admits only the given roles.

    The role is read from the stored user row, so a demotion takes effect
    before the caller's token expires.

    Usage:
        @router.get("/", dependencies=[Depends(require_role("ADMIN"))])
    """
    allowed = {getattr(role, "value", role) for role in roles}

    def _check_role(user: CurrentUserDep) -> User:
        if getattr(user.role, "value", user.role) not in allowed:
            raise InsufficientPermissionsError()
        return user

    return _check_role

