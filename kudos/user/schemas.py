"""User domain schemas.

Security notes:
- password_hash is internal-only and never part of a response schema
- deleted_at is a storage detail and never exposed
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from kudos.user.models import ActivationStatus, User, UserRole


class MemberRead(BaseModel):
    """Member representation shared by the admin and /users/me endpoints.

    Serialized with camelCase keys (``imageUrl``, ``isActive``,
    ``activationStatus``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    name: str
    email: str
    role: UserRole
    image_url: str | None = None
    is_active: bool
    activation_status: ActivationStatus

    @classmethod
    def from_user(cls, user: User) -> "MemberRead":
        return cls.model_validate(user)
