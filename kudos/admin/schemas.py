"""Admin domain schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from kudos.user.models import ActivationStatus, UserRole

DECISION_STATUSES = frozenset({ActivationStatus.approved, ActivationStatus.rejected})
ASSIGNABLE_ROLES = frozenset({UserRole.team_member, UserRole.team_lead})


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HandleTeamLeadSignupRequest(_CamelModel):
    """Admin decision on a pending team-lead signup."""

    member_id: int = Field(gt=0)
    status: ActivationStatus

    @field_validator("status")
    @classmethod
    def check_decision(cls, value: ActivationStatus) -> ActivationStatus:
        if value not in DECISION_STATUSES:
            raise ValueError("status must be 'approved' or 'rejected'")
        return value


class UpdateMemberRoleRequest(_CamelModel):
    """Admins may move members between the non-admin roles only."""

    member_id: int = Field(gt=0)
    role: UserRole

    @field_validator("role")
    @classmethod
    def check_assignable(cls, value: UserRole) -> UserRole:
        if value not in ASSIGNABLE_ROLES:
            raise ValueError("role must be 'team-member' or 'team-lead'")
        return value


class AdminActionResponse(BaseModel):
    success: bool
    message: str
