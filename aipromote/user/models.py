"""User domain models.

SQLModel table definition for User.
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import EmailStr
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from aipromote.core.mixins import TimestampMixin


class UserRole(str, Enum):
    """Account role embedded in access tokens."""

    USER = "USER"
    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"


class User(TimestampMixin, SQLModel, table=True):
    """User database model.

    Note: hashed_password and the verification/reset tokens are internal
    and must never appear in API responses (see user.schemas.UserRead).
    """

    __tablename__: str = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: EmailStr = Field(index=True, unique=True, max_length=255)
    hashed_password: str | None = Field(default=None, max_length=255)
    name: str | None = Field(default=None, max_length=100)
    image: str | None = Field(default=None, max_length=2048)
    role: UserRole = Field(default=UserRole.USER, max_length=20, index=True)
    plan: str = Field(default="free", max_length=50)
    verified: bool = Field(default=False, index=True)

    email_verification_token: str | None = Field(
        default=None, index=True, unique=True, max_length=64
    )
    email_verification_expiry: datetime | None = Field(
        default=None, sa_type=DateTime(timezone=True)
    )
    reset_token: str | None = Field(
        default=None, index=True, unique=True, max_length=64
    )
    reset_token_expiry: datetime | None = Field(
        default=None, sa_type=DateTime(timezone=True)
    )
