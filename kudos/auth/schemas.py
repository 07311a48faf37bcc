"""Auth domain schemas.

Request and response schemas for signup, login and logout.
"""

import re

from pydantic import BaseModel, EmailStr, Field, field_validator

from kudos.user.models import UserRole

_PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$"
)


class SignupRequest(BaseModel):
    """Request schema for account signup."""

    name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(min_length=8)
    role: UserRole

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, value: str) -> str:
        if not _PASSWORD_PATTERN.match(value):
            raise ValueError(
                "Password must contain at least one uppercase letter, one "
                "lowercase letter, one number and one special character"
            )
        return value


class LoginRequest(BaseModel):
    """Request schema for email/password login."""

    email: EmailStr
    password: str


class AuthUserResponse(BaseModel):
    """Response schema for signup and login."""

    id: int
    name: str
    email: str
    role: UserRole


class LogoutResponse(BaseModel):
    """Response schema for logout."""

    message: str


class LoginErrorResponse(BaseModel):
    """Error body returned by the login endpoint."""

    error: str
