"""Admin domain router.

Admin-only routes for team-lead activation requests and member
management.
"""

from fastapi import APIRouter, Depends

from kudos.admin.schemas import (
    AdminActionResponse,
    HandleTeamLeadSignupRequest,
    UpdateMemberRoleRequest,
)
from kudos.admin.service import AdminServiceDep
from kudos.auth.dependencies import require_admin
from kudos.core.constants import CommonResponses, Routes
from kudos.user.schemas import MemberRead

router = APIRouter(
    prefix=Routes.ADMIN.prefix,
    tags=[Routes.ADMIN.tag],
    dependencies=[Depends(require_admin)],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
    },
)


@router.get("/team-lead-requests/pending", response_model=list[MemberRead])
async def get_pending_team_lead_requests(admin: AdminServiceDep):
    """List team leads waiting for approval, newest first."""
    return admin.get_pending_team_lead_requests()


@router.post(
    "/team-lead-requests/handle",
    response_model=MemberRead,
    responses={**CommonResponses.CONFLICT},
)
async def handle_team_lead_signup(
    payload: HandleTeamLeadSignupRequest, admin: AdminServiceDep
):
    """Approve or reject a pending team lead."""
    return admin.handle_team_lead_signup(payload.member_id, payload.status)


@router.get("/members", response_model=list[MemberRead])
async def get_members(admin: AdminServiceDep):
    """List active members."""
    return admin.get_members()


@router.put(
    "/members",
    response_model=AdminActionResponse,
    responses={**CommonResponses.NOT_FOUND},
)
async def update_member_role(payload: UpdateMemberRoleRequest, admin: AdminServiceDep):
    admin.update_member_role(payload.member_id, payload.role)
    return AdminActionResponse(
        success=True, message="Member role updated successfully"
    )


@router.delete(
    "/members/{member_id}",
    response_model=AdminActionResponse,
    responses={**CommonResponses.NOT_FOUND},
)
async def delete_member(member_id: int, admin: AdminServiceDep):
    admin.delete_member(member_id)
    return AdminActionResponse(success=True, message="Member deleted successfully")
