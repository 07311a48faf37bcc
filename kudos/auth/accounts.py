"""Account lifecycle: signup, login and logout.

Composes the user store, the password hasher and the session service.
Each operation runs its steps in order with no surrounding transaction;
uniqueness of emails is left to the store's unique index.
"""

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends

from kudos.auth.exceptions import (
    InvalidCredentialsError,
    NoAdminAvailableError,
    PendingVerificationError,
)
from kudos.auth.models import UserSession
from kudos.auth.passwords import hash_password, verify_password
from kudos.auth.schemas import LoginRequest, SignupRequest
from kudos.auth.service import AuthService, AuthServiceDep
from kudos.core.deps import SessionDep
from kudos.core.email import EmailNotifier, EmailNotifierDep
from kudos.user.exceptions import EmailExistsError, UserInactiveError
from kudos.user.models import User, initial_activation
from kudos.user.repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    """An authenticated user together with the session issued to them."""

    user: User
    session: UserSession


class AccountService:
    def __init__(
        self,
        users: UserRepository,
        auth_service: AuthService,
        notifier: EmailNotifier,
    ):
        self._users = users
        self._auth = auth_service
        self._notifier = notifier

    def signup(self, data: SignupRequest) -> AuthResult:
        """Create an account and, unless it needs approval, log it in.

        Team-lead signups are stored as pending, every admin is notified,
        and the call then fails with PendingVerificationError: the account
        exists but no session is issued.

        Raises:
            EmailExistsError: A live user already has this email.
            NoAdminAvailableError: A pending signup has nobody to approve it.
            PendingVerificationError: The account awaits admin approval.
        """
        if self._users.find_by_email(data.email) is not None:
            raise EmailExistsError()

        is_active, activation_status = initial_activation(data.role)
        user = self._users.create(
            User(
                name=data.name,
                email=data.email,
                password_hash=hash_password(data.password),
                role=data.role,
                is_active=is_active,
                activation_status=activation_status,
            )
        )
        logger.info(
            "User signed up",
            extra={"user_id": user.id, "role": user.role.value},
        )

        if user.is_pending:
            self._request_approval(user)
            raise PendingVerificationError()

        return AuthResult(user=user, session=self._auth.create_session(user.id))

    def _request_approval(self, user: User) -> None:
        admins = self._users.list_admins()
        if not admins:
            logger.error(
                "Pending signup but no admin exists to approve it",
                extra={"user_id": user.id},
            )
            raise NoAdminAvailableError()
        self._notifier.notify_team_lead_request(admins, user)
        logger.info(
            "Notified %d admin(s) of pending team lead",
            len(admins),
            extra={"user_id": user.id},
        )

    def login(self, data: LoginRequest) -> AuthResult:
        """Authenticate by email and password and issue a session.

        The pending check runs before the password check, so an unapproved
        team lead cannot find out whether a password is right.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password.
            PendingVerificationError: The account awaits admin approval.
            UserInactiveError: The account was rejected or suspended.
        """
        user = self._users.find_by_email(data.email)
        if user is None:
            raise InvalidCredentialsError()

        if user.is_pending:
            raise PendingVerificationError()

        if not verify_password(data.password, user.password_hash):
            raise InvalidCredentialsError()

        if not user.is_active:
            raise UserInactiveError()

        return AuthResult(user=user, session=self._auth.create_session(user.id))

    def logout(self, token: str | None) -> bool:
        """Invalidate the caller's session. Logging out twice is not an error."""
        if token:
            self._auth.invalidate_session(token)
        return True


def get_account_service(
    session: SessionDep,
    auth_service: AuthServiceDep,
    notifier: EmailNotifierDep,
) -> AccountService:
    return AccountService(UserRepository(session), auth_service, notifier)


AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
