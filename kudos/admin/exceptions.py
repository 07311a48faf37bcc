"""Admin domain exceptions."""

from kudos.core.exceptions import ConflictError


class TeamLeadRequestNotFoundError(ConflictError):
    """Raised when a team-lead request is missing or was already decided."""

    error_type = "team_lead_request_not_found"

    def __init__(self, message: str = "Team lead not found or already processed"):
        super().__init__(message)
