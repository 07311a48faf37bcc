"""Auth domain router.

Signup, login and logout. Handlers stay thin: they translate between
HTTP and AccountService and manage the session cookie.
"""

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from kudos.auth.accounts import AccountServiceDep, AuthResult
from kudos.auth.dependencies import CurrentUserDep, SessionTokenDep
from kudos.auth.schemas import (
    AuthUserResponse,
    LoginErrorResponse,
    LoginRequest,
    LogoutResponse,
    SignupRequest,
)
from kudos.core.constants import CommonResponses, Routes
from kudos.core.deps import SettingsDep
from kudos.core.exceptions import AppException
from kudos.core.settings import Settings
from kudos.user.schemas import MemberRead

router = APIRouter(prefix=Routes.USERS.prefix, tags=[Routes.USERS.tag])


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=int(settings.session_expires_in.total_seconds()),
        httponly=True,
        secure=settings.is_secure_cookie,
        samesite=settings.cookie_samesite,
    )


def _auth_response(result: AuthResult) -> AuthUserResponse:
    return AuthUserResponse(
        id=result.user.id,
        name=result.user.name,
        email=result.user.email,
        role=result.user.role,
    )


@router.post(
    "/signup",
    response_model=AuthUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.BAD_REQUEST},
)
async def signup(
    payload: SignupRequest,
    response: Response,
    accounts: AccountServiceDep,
    settings: SettingsDep,
):
    """Create an account and start a session.

    Team-lead signups are created but answered with 400
    (pending_verification) and no cookie until an admin approves them.
    """
    result = accounts.signup(payload)
    _set_session_cookie(response, result.session.session_token, settings)
    return _auth_response(result)


@router.post(
    "/login",
    response_model=AuthUserResponse,
    responses={401: {"model": LoginErrorResponse}},
)
async def login(
    payload: LoginRequest,
    response: Response,
    accounts: AccountServiceDep,
    settings: SettingsDep,
):
    """Log in with email and password.

    Every domain failure is answered with 401 and {"error": message}.
    """
    try:
        result = accounts.login(payload)
    except AppException as e:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": e.message},
        )
    _set_session_cookie(response, result.session.session_token, settings)
    return _auth_response(result)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    token: SessionTokenDep,
    accounts: AccountServiceDep,
    settings: SettingsDep,
):
    """End the current session and clear the cookie.

    Succeeds without a cookie too, so repeated logouts are harmless.
    """
    accounts.logout(token)
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.is_secure_cookie,
        samesite=settings.cookie_samesite,
    )
    return LogoutResponse(message="Logged out successfully")


@router.get(
    "/me",
    response_model=MemberRead,
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.FORBIDDEN},
)
async def get_me(user: CurrentUserDep):
    """Get the current authenticated user."""
    return MemberRead.from_user(user)
