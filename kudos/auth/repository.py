"""Session persistence."""

from sqlalchemy import update
from sqlmodel import Session, col, select

from kudos.auth.models import UserSession
from kudos.core.mixins import utc_now


class SessionRepository:
    def __init__(self, session: Session):
        self._session = session

    def create(self, user_session: UserSession) -> UserSession:
        self._session.add(user_session)
        self._session.commit()
        self._session.refresh(user_session)
        return user_session

    def find_by_token(self, token: str) -> UserSession | None:
        return self._session.exec(
            select(UserSession).where(
                UserSession.session_token == token,
                col(UserSession.deleted_at).is_(None),
            )
        ).first()

    def delete(self, token: str) -> bool:
        """Soft-delete the live row for ``token``; a missing token is not an error."""
        self._session.exec(
            update(UserSession)
            .where(
                col(UserSession.session_token) == token,
                col(UserSession.deleted_at).is_(None),
            )
            .values(deleted_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        self._session.commit()
        return True

    def delete_for_user(self, user_id: int) -> int:
        result = self._session.exec(
            update(UserSession)
            .where(
                col(UserSession.user_id) == user_id,
                col(UserSession.deleted_at).is_(None),
            )
            .values(deleted_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        self._session.commit()
        return result.rowcount
