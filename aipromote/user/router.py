"""User domain router.

Profile reads and updates. A user may read and update their own record;
admins may read and update any record.
"""

import uuid

from fastapi import APIRouter, Depends
from sqlmodel import Session, col, select

from aipromote.auth.dependencies import CurrentUserDep, require_role
from aipromote.auth.exceptions import InsufficientPermissionsError
from aipromote.core.constants import CommonResponses, Routes
from aipromote.core.deps import SessionDep
from aipromote.core.rate_limit import RateLimiters
from aipromote.models.responses import DataResponse
from aipromote.user.exceptions import UserNotFoundError
from aipromote.user.models import User, UserRole
from aipromote.user.schemas import UserRead, UserUpdate

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    dependencies=[Depends(RateLimiters.API)],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
        **CommonResponses.TOO_MANY_REQUESTS,
    },
)


def _get_accessible_user(
    user_id: uuid.UUID, current: User, session: Session
) -> User:
    if current.id != user_id and current.role != UserRole.ADMIN:
        raise InsufficientPermissionsError()

    user = session.get(User, user_id)
    if not user:
        raise UserNotFoundError()
    return user


@router.get(
    "",
    response_model=DataResponse[list[UserRead]],
    dependencies=[Depends(require_role(UserRole.ADMIN))],
)
def list_users(session: SessionDep):
    """List all users. Admin only."""
    users = session.exec(select(User).order_by(col(User.created_at).asc())).all()
    return DataResponse(data=[UserRead.model_validate(user) for user in users])


@router.get(
    "/{user_id}",
    response_model=DataResponse[UserRead],
    responses={**CommonResponses.NOT_FOUND},
)
def get_user(user_id: uuid.UUID, current: CurrentUserDep, session: SessionDep):
    """Get a user by ID. Self or admin only."""
    user = _get_accessible_user(user_id, current, session)
    return DataResponse(data=UserRead.model_validate(user))


@router.patch(
    "/{user_id}",
    response_model=DataResponse[UserRead],
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.BAD_REQUEST},
)
def update_user(
    user_id: uuid.UUID,
    user_update: UserUpdate,
    current: CurrentUserDep,
    session: SessionDep,
):
    """Update a user's profile. Self or admin only.

    Only name and image can change; role, plan and verification status are
    not writable here.
    """
    user = _get_accessible_user(user_id, current, session)

    update_data = user_update.model_dump(mode="json", exclude_unset=True)
    for key, value in update_data.items():
        setattr(user, key, value)

    session.add(user)
    session.commit()
    session.refresh(user)
    return DataResponse(data=UserRead.model_validate(user))
