"""User domain schemas.

Request and response schemas for user operations.

Security notes:
- hashed_password and the verification/reset tokens are internal-only
- UserRead contains only fields safe for API responses
- UserUpdate is restricted to profile fields to prevent privilege escalation
"""

import uuid
from datetime import UTC, datetime

from pydantic import EmailStr, Field, HttpUrl, field_serializer
from sqlmodel import SQLModel

from aipromote.user.models import UserRole


class UserRead(SQLModel):
    """Public representation of a user account.

    Never add hashed_password or token fields here.
    """

    id: uuid.UUID
    email: EmailStr
    name: str | None
    image: str | None
    role: UserRole
    plan: str
    verified: bool
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_datetime(self, value: datetime) -> str:
        """Format datetime as ISO 8601 string in UTC with a Z suffix.

        Naive values come from the database and are already UTC.
        """
        if value.tzinfo is not None:
            utc_value = value.astimezone(UTC)
        else:
            utc_value = value.replace(tzinfo=UTC)
        return utc_value.replace(microsecond=0).isoformat().replace("+00:00", "Z")


class UserUpdate(SQLModel):
    """Profile fields a user (or an admin) may change."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    image: HttpUrl | None = None
