"""Tests for kudos/core/email.py - Resend notifications."""

from unittest.mock import patch

import pytest

from kudos.core.email import EmailNotifier, init_resend
from kudos.core.exceptions import ExternalServiceError
from kudos.core.settings import Settings
from kudos.user.models import ActivationStatus, User, UserRole


def _settings(api_key: str | None = "re_test_key") -> Settings:
    return Settings(
        env_name="test",
        resend_api_key=api_key,
        app_domain="kudos.example.com",
        client_url="https://kudos.example.com",
    )


def _user(email: str, role: UserRole, status: ActivationStatus) -> User:
    return User(
        id=1,
        name="Lee Lead",
        email=email,
        password_hash="x",
        role=role,
        activation_status=status,
    )


def test_init_resend_sets_api_key():
    """Test init_resend() configures the Resend client when a key is set."""
    with patch("kudos.core.email.resend") as mock_resend:
        init_resend(_settings("re_abc"))

    assert mock_resend.api_key == "re_abc"


def test_init_resend_without_key():
    """Test init_resend() leaves the Resend client alone without a key."""
    with patch("kudos.core.email.resend") as mock_resend:
        mock_resend.api_key = None
        init_resend(_settings(None))

    assert mock_resend.api_key is None


def test_notify_team_lead_request_emails_every_admin():
    """Test the approval request goes to all admins with the member's details."""
    admins = [
        _user("a1@example.com", UserRole.admin, ActivationStatus.approved),
        _user("a2@example.com", UserRole.admin, ActivationStatus.approved),
    ]
    member = _user("lee@example.com", UserRole.team_lead, ActivationStatus.pending)

    with patch("kudos.core.email.resend.Emails.send") as mock_send:
        EmailNotifier(_settings()).notify_team_lead_request(admins, member)

    mock_send.assert_called_once()
    params = mock_send.call_args.args[0]
    assert params["to"] == ["a1@example.com", "a2@example.com"]
    assert params["from"] == "Kudos Station <noreply@kudos.example.com>"
    assert "Lee Lead" in params["html"]
    assert "lee@example.com" in params["html"]
    assert "https://kudos.example.com/admin/team-lead-requests" in params["html"]


@pytest.mark.parametrize(
    ("status", "phrase"),
    [
        (ActivationStatus.approved, "approved"),
        (ActivationStatus.rejected, "declined"),
    ],
)
def test_notify_team_lead_decision(status, phrase):
    """Test the decision email reflects the outcome."""
    member = _user("lee@example.com", UserRole.team_lead, status)

    with patch("kudos.core.email.resend.Emails.send") as mock_send:
        EmailNotifier(_settings()).notify_team_lead_decision(member)

    params = mock_send.call_args.args[0]
    assert params["to"] == ["lee@example.com"]
    assert phrase in params["subject"]
    assert phrase in params["html"]


def test_send_skipped_without_api_key():
    """Test nothing is sent when Resend is not configured."""
    member = _user("lee@example.com", UserRole.team_lead, ActivationStatus.approved)
    notifier = EmailNotifier(_settings(None))

    with patch("kudos.core.email.resend.Emails.send") as mock_send:
        notifier.notify_team_lead_decision(member)

    assert notifier.enabled is False
    mock_send.assert_not_called()


def test_send_failure_raises_external_service_error():
    """Test provider errors are wrapped in ExternalServiceError."""
    member = _user("lee@example.com", UserRole.team_lead, ActivationStatus.approved)

    with patch(
        "kudos.core.email.resend.Emails.send", side_effect=RuntimeError("boom")
    ):
        with pytest.raises(ExternalServiceError) as exc_info:
            EmailNotifier(_settings()).notify_team_lead_decision(member)

    assert exc_info.value.status_code == 502
