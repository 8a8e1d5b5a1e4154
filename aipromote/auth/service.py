"""Authentication service.

Business logic behind the auth routes: credential checks, token issuing,
registration, email verification and password reset. Route handlers stay
thin and delegate here.
"""

import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from aipromote.auth.exceptions import (
    InvalidCredentialsError,
    ResetTokenError,
    VerificationTokenError,
)
from aipromote.auth.schemas import RegisterRequest, SignInResult
from aipromote.auth.tokens import TokenPrincipal, create_access_token
from aipromote.core.email import (
    send_email_verification_email,
    send_password_reset_email,
)
from aipromote.core.mixins import utc_now
from aipromote.core.security import (
    generate_account_token,
    get_password_hash,
    verify_password,
)
from aipromote.core.settings import Settings, get_settings
from aipromote.db.engine import get_session
from aipromote.user.exceptions import EmailExistsError
from aipromote.user.models import User, UserRole
from aipromote.user.schemas import UserRead

logger = logging.getLogger(__name__)


def principal_for(user: User) -> TokenPrincipal:
    return TokenPrincipal(
        id=str(user.id),
        email=user.email,
        role=UserRole(user.role).value,
        verified=user.verified,
    )


class AuthService:
    """Credential and account-token operations over the users table."""

    def __init__(self, session: Session, settings: Settings):
        self._session = session
        self._settings = settings

    def _get_by_email(self, email: str) -> User | None:
        return self._session.exec(select(User).where(User.email == email)).first()

    def issue_token(self, user: User) -> str:
        """Sign an access token for ``user``."""
        return create_access_token(
            principal_for(user),
            self._settings.jwt_secret,
            self._settings.jwt_expires_in,
            self._settings.jwt_algorithm,
        )

    def sign_in(self, email: str, password: str) -> SignInResult:
        """Check credentials and issue an access token.

        Unknown email and wrong password raise the same error.

        Raises:
            InvalidCredentialsError: If the credentials are rejected
        """
        user = self._get_by_email(email)
        hashed_password = user.hashed_password if user is not None else None

        if not verify_password(password, hashed_password) or user is None:
            raise InvalidCredentialsError()

        return SignInResult(
            user=UserRead.model_validate(user),
            token=self.issue_token(user),
            expires_in=f"{self._settings.jwt_expires_hours}h",
        )

    def register(self, data: RegisterRequest) -> User:
        """Create an unverified account and send its verification email.

        Raises:
            EmailExistsError: If the email is already registered
        """
        if self._get_by_email(data.email) is not None:
            raise EmailExistsError()

        token = generate_account_token()
        user = User(
            email=data.email,
            hashed_password=get_password_hash(data.password),
            name=data.name,
            role=UserRole.USER,
            plan="free",
            verified=False,
            email_verification_token=token,
            email_verification_expiry=utc_now()
            + self._settings.email_verification_expires_in,
        )
        try:
            self._session.add(user)
            self._session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email.
            self._session.rollback()
            raise EmailExistsError() from e
        self._session.refresh(user)

        # Best-effort: a failed send must not fail registration.
        try:
            send_email_verification_email(user.email, token, name=user.name)
        except Exception as e:
            logger.warning(
                "Verification email failed for user %s: %s",
                user.id,
                e,
                extra={"user_id": str(user.id)},
            )

        return user

    def verify_email(self, token: str) -> User:
        """Mark the owner of an unexpired verification token as verified.

        The token is cleared in the same commit, so it can be used once.

        Raises:
            VerificationTokenError: If the token is unknown or expired
        """
        user = self._session.exec(
            select(User).where(
                User.email_verification_token == token,
                User.email_verification_expiry >= utc_now(),
            )
        ).first()

        if user is None:
            raise VerificationTokenError()

        user.verified = True
        user.email_verification_token = None
        user.email_verification_expiry = None
        self._session.add(user)
        self._session.commit()
        self._session.refresh(user)
        return user

    def request_password_reset(self, email: str) -> None:
        """Store a reset token and email it, if the account exists.

        Silent for unknown emails to prevent account enumeration.
        """
        user = self._get_by_email(email)
        if user is None:
            return

        token = generate_account_token()
        user.reset_token = token
        user.reset_token_expiry = utc_now() + self._settings.password_reset_expires_in
        self._session.add(user)
        self._session.commit()

        try:
            send_password_reset_email(user.email, token, name=user.name)
        except Exception as e:
            logger.warning(
                "Password reset email failed for user %s: %s",
                user.id,
                e,
                extra={"user_id": str(user.id)},
            )

    def reset_password(self, token: str, new_password: str) -> None:
        """Replace the password of the owner of an unexpired reset token.

        Raises:
            ResetTokenError: If the token is unknown or expired
        """
        user = self._session.exec(
            select(User).where(
                User.reset_token == token,
                User.reset_token_expiry >= utc_now(),
            )
        ).first()

        if user is None:
            raise ResetTokenError()

        user.hashed_password = get_password_hash(new_password)
        user.reset_token = None
        user.reset_token_expiry = None
        self._session.add(user)
        self._session.commit()


def get_auth_service(
    session: Annotated[Session, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    """FastAPI dependency providing an AuthService bound to the request session."""
    return AuthService(session, settings)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
