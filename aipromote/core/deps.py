"""Centralized dependency type aliases for FastAPI routes.

Import shared dependencies from this single module:
    from aipromote.core.deps import SessionDep, SettingsDep
Auth-specific aliases live in aipromote.auth.dependencies.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from aipromote.core.settings import Settings, get_settings
from aipromote.db.engine import get_session

# Database session
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]
