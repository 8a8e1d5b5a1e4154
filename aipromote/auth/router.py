"""Auth domain router.

Sign-in, registration, email verification and password reset, plus the
development mock endpoints the frontend's auth client polls. Handlers are
thin: each validates its body, calls AuthService and wraps the result in the
success envelope. Every route carries a rate-limit dependency, which runs
before body validation.
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, status

from aipromote.auth.dependencies import CurrentUserDep
from aipromote.auth.schemas import (
    AuthProvider,
    ForgotPasswordRequest,
    MockSession,
    MockSessionUser,
    RegisterRequest,
    ResetPasswordRequest,
    SessionMessage,
    SignInRequest,
    SignInResult,
    VerifyEmailRequest,
)
from aipromote.auth.service import AuthServiceDep
from aipromote.core.constants import CommonResponses, Routes
from aipromote.core.deps import SettingsDep
from aipromote.core.mixins import utc_now
from aipromote.core.rate_limit import RateLimiters
from aipromote.models.responses import DataResponse, MessageResponse
from aipromote.user.schemas import UserRead

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.BAD_REQUEST, **CommonResponses.TOO_MANY_REQUESTS},
)


@router.post(
    "/signin",
    response_model=DataResponse[SignInResult],
    dependencies=[Depends(RateLimiters.AUTH)],
    responses={**CommonResponses.UNAUTHORIZED},
)
def signin(payload: SignInRequest, auth: AuthServiceDep):
    """Sign in with email/password and receive a bearer token.

    Unknown accounts and wrong passwords get the same 401 response.
    """
    result = auth.sign_in(email=payload.email, password=payload.password)
    return DataResponse(data=result)


@router.post(
    "/register",
    response_model=DataResponse[UserRead],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(RateLimiters.AUTH)],
    responses={**CommonResponses.CONFLICT},
)
def register(payload: RegisterRequest, auth: AuthServiceDep):
    """Register a new, unverified account and send a verification email."""
    user = auth.register(payload)
    return DataResponse(data=UserRead.model_validate(user))


@router.post(
    "/verify-email",
    response_model=MessageResponse,
    dependencies=[Depends(RateLimiters.AUTH)],
    responses={**CommonResponses.NOT_FOUND},
)
def verify_email(payload: VerifyEmailRequest, auth: AuthServiceDep):
    """Confirm an email address with the token from the verification email."""
    auth.verify_email(payload.token)
    return MessageResponse(message="Email verified successfully")


@router.post(
    "/forgot-password",
    response_model=MessageResponse,
    dependencies=[Depends(RateLimiters.PASSWORD_RESET)],
)
def forgot_password(payload: ForgotPasswordRequest, auth: AuthServiceDep):
    """Request a password reset email.

    Always returns success to prevent email enumeration.
    """
    auth.request_password_reset(payload.email)
    return MessageResponse(
        message="If an account exists, a password reset email will be sent"
    )


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    dependencies=[Depends(RateLimiters.AUTH)],
    responses={**CommonResponses.NOT_FOUND},
)
def reset_password(payload: ResetPasswordRequest, auth: AuthServiceDep):
    """Set a new password using the token from the reset email."""
    auth.reset_password(payload.token, payload.password)
    return MessageResponse(message="Password reset successfully")


@router.get(
    "/me",
    response_model=DataResponse[UserRead],
    dependencies=[Depends(RateLimiters.API)],
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.NOT_FOUND},
)
async def get_me(user: CurrentUserDep):
    """Get the user behind the bearer token."""
    return DataResponse(data=UserRead.model_validate(user))


# Development mocks. They return fixed data so the frontend's auth client
# gets well-formed responses without a real session provider.


@router.get("/providers", response_model=dict[str, AuthProvider])
async def providers(settings: SettingsDep):
    """List sign-in providers (mock)."""
    base_url = settings.app_url.rstrip("/")
    logger.debug("Mock providers endpoint called")
    return {
        "credentials": AuthProvider(
            id="credentials",
            name="Credentials",
            type="credentials",
            signin_url=f"{base_url}/api/auth/signin/credentials",
            callback_url=f"{base_url}/api/auth/callback/credentials",
        )
    }


@router.get("/session", response_model=MockSession)
async def get_session_mock():
    """Return a fixed development session (mock)."""
    logger.debug("Mock session endpoint called")
    return MockSession(
        user=MockSessionUser(
            id="dev-user",
            email="dev@example.com",
            name="Development User",
            role="USER",
        ),
        expires=utc_now() + timedelta(hours=24),
    )


@router.post("/session", response_model=SessionMessage)
async def update_session_mock():
    """Accept session updates without storing them (mock)."""
    return SessionMessage(message="Session endpoint")


@router.delete("/session", response_model=SessionMessage)
async def delete_session_mock():
    """Pretend to end the session (mock)."""
    return SessionMessage(message="Session deleted")
