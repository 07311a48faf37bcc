"""
Model registry.

IMPORTANT (Alembic / SQLModel):
- Alembic autogenerate and ``create_tables`` rely on ``SQLModel.metadata``,
  which is populated only when the table models are imported.
- This module must import every SQLModel ``table=True`` model.
"""

from kudos.auth.models import UserSession  # noqa: F401
from kudos.user.models import User  # noqa: F401
