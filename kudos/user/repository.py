"""User persistence.

Every query here excludes soft-deleted rows. Writes commit immediately:
each call is one unit of work.
"""

from collections.abc import Sequence

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from kudos.core.mixins import utc_now
from kudos.user.exceptions import EmailExistsError
from kudos.user.models import ActivationStatus, User, UserRole


class UserRepository:
    def __init__(self, session: Session):
        self._session = session

    def _live(self):
        return select(User).where(col(User.deleted_at).is_(None))

    def get(self, user_id: int) -> User | None:
        return self._session.exec(self._live().where(User.id == user_id)).first()

    def find_by_email(self, email: str) -> User | None:
        return self._session.exec(self._live().where(User.email == email)).first()

    def create(self, user: User) -> User:
        """Insert a user.

        Raises:
            EmailExistsError: If the live-email unique index rejects the row.
        """
        self._session.add(user)
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            raise EmailExistsError() from e
        self._session.refresh(user)
        return user

    def list_admins(self) -> Sequence[User]:
        return self._session.exec(
            self._live().where(User.role == UserRole.admin).order_by(User.id)
        ).all()

    def list_active_members(self) -> Sequence[User]:
        return self._session.exec(
            self._live().where(col(User.is_active).is_(True)).order_by(User.id)
        ).all()

    def list_pending_team_leads(self) -> Sequence[User]:
        return self._session.exec(
            self._live()
            .where(
                User.role == UserRole.team_lead,
                User.activation_status == ActivationStatus.pending,
            )
            .order_by(col(User.created_at).desc(), col(User.id).desc())
        ).all()

    def decide_team_lead(
        self, member_id: int, decision: ActivationStatus
    ) -> User | None:
        """Apply an admin decision to a pending team lead.

        The status guard is part of the UPDATE itself, so two concurrent
        decisions cannot both succeed. Returns None when no row matched.
        """
        statement = (
            update(User)
            .where(
                col(User.id) == member_id,
                col(User.deleted_at).is_(None),
                col(User.role) == UserRole.team_lead,
                col(User.activation_status) == ActivationStatus.pending,
            )
            .values(
                activation_status=decision,
                is_active=decision == ActivationStatus.approved,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = self._session.exec(statement)
        self._session.commit()
        if result.rowcount == 0:
            return None
        # Expire any cached instance so the read reflects the UPDATE.
        self._session.expire_all()
        return self.get(member_id)

    def update_role(self, member_id: int, role: UserRole) -> User | None:
        user = self.get(member_id)
        if user is None:
            return None
        user.role = role
        self._session.add(user)
        self._session.commit()
        self._session.refresh(user)
        return user

    def soft_delete(self, member_id: int) -> bool:
        result = self._session.exec(
            update(User)
            .where(col(User.id) == member_id, col(User.deleted_at).is_(None))
            .values(deleted_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        self._session.commit()
        return result.rowcount > 0
