"""User domain models.

SQLModel table definition for User plus the closed role and activation
status enumerations.
"""

from enum import Enum

from sqlalchemy import Column, Index, text
from sqlalchemy import Enum as SAEnum
from sqlmodel import Field, SQLModel

from kudos.core.mixins import SoftDeleteMixin, TimestampMixin


class UserRole(str, Enum):
    """Role of a user inside the organisation."""

    admin = "admin"
    team_member = "team-member"
    team_lead = "team-lead"


class ActivationStatus(str, Enum):
    """Account activation status.

    - pending: team-lead signup waiting for an admin decision
    - approved: account usable
    - rejected: team-lead signup declined by an admin
    - suspended: account blocked after approval
    """

    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    suspended = "suspended"


def _enum_column(enum_cls: type[Enum]) -> SAEnum:
    # Persist enum values ("team-lead"), not member names ("team_lead").
    return SAEnum(
        enum_cls,
        native_enum=False,
        length=20,
        values_callable=lambda members: [m.value for m in members],
    )


def initial_activation(role: UserRole) -> tuple[bool, ActivationStatus]:
    """Return ``(is_active, activation_status)`` for a freshly signed-up role."""
    match role:
        case UserRole.team_lead:
            return False, ActivationStatus.pending
        case UserRole.admin | UserRole.team_member:
            return True, ActivationStatus.approved


class User(TimestampMixin, SoftDeleteMixin, SQLModel, table=True):
    """User database model.

    Note: password_hash is internal-only and must never appear in an API
    response schema.
    """

    __tablename__: str = "users"
    __table_args__ = (
        # Email is unique among live rows only; deleted users free their email.
        Index(
            "uq_users_email_live",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)
    email: str = Field(max_length=255, index=True)
    password_hash: str = Field(max_length=255)
    role: UserRole = Field(sa_column=Column(_enum_column(UserRole), nullable=False))
    is_active: bool = Field(default=True)
    activation_status: ActivationStatus = Field(
        default=ActivationStatus.approved,
        sa_column=Column(_enum_column(ActivationStatus), nullable=False, index=True),
    )
    image_url: str | None = Field(default=None, max_length=2048)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin

    @property
    def is_pending(self) -> bool:
        return self.activation_status == ActivationStatus.pending
