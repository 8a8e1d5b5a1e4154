"""Auth domain schemas.

Request and response schemas for authentication operations.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from aipromote.user.schemas import UserRead


class SignInRequest(BaseModel):
    """Request schema for email/password sign-in."""

    email: EmailStr
    password: str = Field(min_length=1)


class SignInResult(BaseModel):
    """Payload returned on successful sign-in."""

    user: UserRead
    token: str
    expires_in: str


class RegisterRequest(BaseModel):
    """Request schema for account registration."""

    email: EmailStr
    password: str = Field(min_length=8)
    name: str = Field(min_length=1, max_length=100)


class VerifyEmailRequest(BaseModel):
    """Request schema for confirming an email verification token."""

    token: str = Field(min_length=1)


class ForgotPasswordRequest(BaseModel):
    """Request schema for starting a password reset."""

    email: EmailStr


class ResetPasswordRequest(BaseModel):
    """Request schema for completing a password reset."""

    token: str = Field(min_length=1)
    password: str = Field(min_length=8)


# Development mock payloads


class AuthProvider(BaseModel):
    id: str
    name: str
    type: str
    signin_url: str
    callback_url: str


class MockSessionUser(BaseModel):
    id: str
    email: str
    name: str
    image: str | None = None
    role: str
    email_verified: datetime | None = None


class MockSession(BaseModel):
    user: MockSessionUser
    expires: datetime


class SessionMessage(BaseModel):
    message: str
