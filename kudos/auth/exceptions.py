"""Auth domain exceptions.

Authentication, authorization and account-lifecycle failures.
"""

from kudos.core.exceptions import AppException, InternalError, ValidationError


# Authentication errors (401)
class AuthenticationError(AppException):
    """Base class for authentication failures."""

    status_code = 401
    error_type = "authentication_error"

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when the email/password combination is invalid.

    The message is identical whichever factor failed.
    """

    error_type = "invalid_credentials"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class NotAuthenticatedError(AuthenticationError):
    """Raised when a protected route is called without a session token."""

    error_type = "not_authenticated"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidSessionError(AuthenticationError):
    """Raised when the session token is unknown, expired or orphaned."""

    error_type = "invalid_session"

    def __init__(self, message: str = "Invalid or expired session"):
        super().__init__(message)


# Authorization errors (403)
class AuthorizationError(AppException):
    """Base class for authorization failures."""

    status_code = 403
    error_type = "authorization_error"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class AdminRequiredError(AuthorizationError):
    """Raised when admin privileges are required."""

    error_type = "admin_required"

    def __init__(self, message: str = "Admin privileges required"):
        super().__init__(message)


# Account lifecycle errors
class PendingVerificationError(ValidationError):
    """Raised when a team-lead account is still waiting for admin approval."""

    error_type = "pending_verification"

    def __init__(
        self,
        message: str = "Your account is pending verification by an administrator",
    ):
        super().__init__(message)


class NoAdminAvailableError(InternalError):
    """Raised when a pending signup needs an admin but none exists."""

    error_type = "no_admin_available"

    def __init__(self, message: str = "No administrator available to verify account"):
        super().__init__(message)
