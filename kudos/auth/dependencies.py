"""Auth domain dependencies.

Resolve the caller's session token to a user for protected routes, and
gate admin-only routes on the user's role.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from kudos.auth.exceptions import (
    AdminRequiredError,
    InvalidSessionError,
    NotAuthenticatedError,
)
from kudos.auth.models import UserSession
from kudos.auth.service import AuthServiceDep
from kudos.core.deps import SessionDep, SettingsDep
from kudos.user.exceptions import UserInactiveError
from kudos.user.models import User
from kudos.user.repository import UserRepository

security = HTTPBearer(auto_error=False)


def get_session_token(
    request: Request,
    settings: SettingsDep,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(security)
    ] = None,
) -> str | None:
    """Read the session token from the cookie, falling back to a bearer header."""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


SessionTokenDep = Annotated[str | None, Depends(get_session_token)]


def get_current_session(
    token: SessionTokenDep, auth_service: AuthServiceDep
) -> UserSession:
    """Validate the caller's session.

    Raises:
        NotAuthenticatedError: If no token was sent
        InvalidSessionError: If the token is unknown or expired
    """
    if not token:
        raise NotAuthenticatedError()

    user_session = auth_service.validate_session(token)
    if user_session is None:
        raise InvalidSessionError()
    return user_session


CurrentSessionDep = Annotated[UserSession, Depends(get_current_session)]


def get_current_user(
    request: Request, user_session: CurrentSessionDep, session: SessionDep
) -> User:
    """Return the live user owning the current session.

    Raises:
        InvalidSessionError: If the owning user was deleted
        UserInactiveError: If the user is rejected or suspended
    """
    user = UserRepository(session).get(user_session.user_id)
    if user is None:
        raise InvalidSessionError()

    if not user.is_active:
        raise UserInactiveError()

    request.state.user_id = user.id
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def get_admin_user(user: CurrentUserDep) -> User:
    """Verify the current user has the admin role.

    Raises:
        AdminRequiredError: If user is not an admin
    """
    if not user.is_admin:
        raise AdminRequiredError()
    return user


AdminUserDep = Annotated[User, Depends(get_admin_user)]


def require_admin(_user: AdminUserDep) -> None:
    """Require admin privileges without injecting user into path operation."""
