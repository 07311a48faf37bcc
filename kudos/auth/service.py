"""Session lifecycle service.

Creates, validates and invalidates opaque session tokens. Expired sessions
are purged lazily: the first lookup that finds one past its expiry
deletes it.
"""

import logging
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Annotated

from fastapi import Depends

from kudos.auth.models import UserSession
from kudos.auth.repository import SessionRepository
from kudos.core.deps import SessionDep, SettingsDep
from kudos.core.mixins import as_utc, utc_now

logger = logging.getLogger(__name__)

DEFAULT_SESSION_LIFETIME = timedelta(days=7)

# 32 random bytes -> 64 hex characters
TOKEN_BYTES = 32


def generate_session_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)


class AuthService:
    """Owns the session lifecycle.

    Store errors are not caught here; they fail the calling request.
    """

    def __init__(
        self,
        repository: SessionRepository,
        expires_in: timedelta = DEFAULT_SESSION_LIFETIME,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._repository = repository
        self._expires_in = expires_in
        self._clock = clock

    def create_session(self, user_id: int) -> UserSession:
        user_session = UserSession(
            user_id=user_id,
            session_token=generate_session_token(),
            expires_at=self._clock() + self._expires_in,
        )
        user_session = self._repository.create(user_session)
        logger.info("Session created", extra={"user_id": user_id})
        return user_session

    def validate_session(self, token: str) -> UserSession | None:
        """Return the live session for ``token``, or None.

        A session whose expiry is at or before now is expired; it is
        deleted as a side effect of this check.
        """
        user_session = self._repository.find_by_token(token)
        if user_session is None:
            return None

        if as_utc(user_session.expires_at) <= as_utc(self._clock()):
            self._repository.delete(token)
            logger.info(
                "Expired session purged", extra={"user_id": user_session.user_id}
            )
            return None

        return user_session

    def invalidate_session(self, token: str) -> bool:
        return self._repository.delete(token)

    def invalidate_user_sessions(self, user_id: int) -> int:
        count = self._repository.delete_for_user(user_id)
        if count:
            logger.info("Invalidated %d session(s)", count, extra={"user_id": user_id})
        return count


def get_auth_service(session: SessionDep, settings: SettingsDep) -> AuthService:
    return AuthService(
        SessionRepository(session), expires_in=settings.session_expires_in
    )


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
