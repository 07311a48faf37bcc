"""User domain exceptions.

User-related exceptions for not found, inactive, and duplicate scenarios.
"""

from kudos.core.exceptions import AppException, BadRequestError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when user cannot be found."""

    error_type = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class UserInactiveError(AppException):
    """Raised when a rejected or suspended account tries to act."""

    status_code = 403
    error_type = "user_inactive"

    def __init__(self, message: str = "User is inactive"):
        super().__init__(message)


class EmailExistsError(BadRequestError):
    """Raised when signing up with an email a live user already has."""

    error_type = "email_exists"

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)
