"""Shared dependency type aliases for FastAPI routes.

Domain-specific dependencies (current user, services) live next to their
domain; this module holds the cross-cutting ones.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from kudos.core.settings import Settings, get_app_settings
from kudos.db.engine import get_session

# Database session
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
