"""Auth domain models.

SQLModel table definition for login sessions.
"""

from datetime import datetime

from sqlalchemy import Index, text
from sqlmodel import Field, SQLModel

from kudos.core.mixins import SoftDeleteMixin, utc_now


class UserSession(SoftDeleteMixin, SQLModel, table=True):
    """A bearer session bound to one user.

    The token is the lookup key. At most one live row exists per token.
    """

    __tablename__: str = "sessions"
    __table_args__ = (
        Index(
            "uq_sessions_token_live",
            "session_token",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    session_token: str = Field(max_length=128)
    expires_at: datetime
    created_at: datetime = Field(default_factory=utc_now)
