"""Admin operations on members and team-lead activation requests."""

import logging
from typing import Annotated

from fastapi import Depends

from kudos.admin.exceptions import TeamLeadRequestNotFoundError
from kudos.auth.service import AuthService, AuthServiceDep
from kudos.core.deps import SessionDep
from kudos.core.email import EmailNotifier, EmailNotifierDep
from kudos.user.exceptions import UserNotFoundError
from kudos.user.models import ActivationStatus, UserRole
from kudos.user.repository import UserRepository
from kudos.user.schemas import MemberRead

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(
        self,
        users: UserRepository,
        auth_service: AuthService,
        notifier: EmailNotifier,
    ):
        self._users = users
        self._auth = auth_service
        self._notifier = notifier

    def get_pending_team_lead_requests(self) -> list[MemberRead]:
        pending = self._users.list_pending_team_leads()
        return [MemberRead.from_user(u) for u in pending]

    def handle_team_lead_signup(
        self, member_id: int, decision: ActivationStatus
    ) -> MemberRead:
        """Approve or reject a pending team lead.

        The member is notified afterwards on a best-effort basis; a failed
        notification does not undo the decision.

        Raises:
            TeamLeadRequestNotFoundError: No pending team lead has this id,
                including the case where another admin decided first.
        """
        member = self._users.decide_team_lead(member_id, decision)
        if member is None:
            raise TeamLeadRequestNotFoundError()

        logger.info(
            "Team lead request %s",
            decision.value,
            extra={"member_id": member_id},
        )
        try:
            self._notifier.notify_team_lead_decision(member)
        except Exception:
            logger.warning(
                "Failed to notify team lead of decision",
                extra={"member_id": member_id},
                exc_info=True,
            )
        return MemberRead.from_user(member)

    def get_members(self) -> list[MemberRead]:
        return [MemberRead.from_user(u) for u in self._users.list_active_members()]

    def update_member_role(self, member_id: int, role: UserRole) -> None:
        if self._users.update_role(member_id, role) is None:
            raise UserNotFoundError("Member not found")
        logger.info(
            "Member role updated to %s", role.value, extra={"member_id": member_id}
        )

    def delete_member(self, member_id: int) -> None:
        """Soft-delete a member and end their open sessions."""
        if not self._users.soft_delete(member_id):
            raise UserNotFoundError("Member not found")
        self._auth.invalidate_user_sessions(member_id)
        logger.info("Member deleted", extra={"member_id": member_id})


def get_admin_service(
    session: SessionDep,
    auth_service: AuthServiceDep,
    notifier: EmailNotifierDep,
) -> AdminService:
    return AdminService(UserRepository(session), auth_service, notifier)


AdminServiceDep = Annotated[AdminService, Depends(get_admin_service)]
