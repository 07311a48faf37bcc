"""Outbound email notifications via Resend.

Emails are rendered from Jinja2 templates in kudos/templates/emails.
When RESEND_API_KEY is not configured, delivery is skipped and logged so
local development works without a mail account.
"""

import logging
from collections.abc import Sequence
from typing import Annotated

import resend
from fastapi import Depends

from kudos.core.constants import JinjaEmailTemplatesEnv
from kudos.core.exceptions import ExternalServiceError
from kudos.core.settings import Settings, get_app_settings
from kudos.user.models import ActivationStatus, User

logger = logging.getLogger(__name__)

SENDER_NAME = "Kudos Station"


def _render_template(template_name: str, **context: object) -> str:
    template = JinjaEmailTemplatesEnv.get_template(template_name)
    return template.render(**context)


def init_resend(settings: Settings) -> None:
    """Initialize Resend with API key if available."""
    if not settings.resend_api_key:
        return
    resend.api_key = settings.resend_api_key


class EmailNotifier:
    """Sends account lifecycle notifications."""

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def enabled(self) -> bool:
        return bool(self._settings.resend_api_key)

    def _send(self, to: Sequence[str], subject: str, html: str) -> None:
        if not self.enabled:
            logger.info(
                "Email delivery disabled; skipping %r to %d recipient(s)",
                subject,
                len(to),
            )
            return
        try:
            resend.Emails.send(
                {
                    "from": f"{SENDER_NAME} <noreply@{self._settings.app_domain}>",
                    "to": list(to),
                    "subject": subject,
                    "html": html,
                }
            )
        except Exception as e:
            raise ExternalServiceError("Failed to send email") from e

    def notify_team_lead_request(self, admins: Sequence[User], member: User) -> None:
        """Tell every admin that a team lead is waiting for approval."""
        html = _render_template(
            "team-lead-request.html",
            member_name=member.name,
            member_email=member.email,
            review_url=f"{self._settings.client_url}/admin/team-lead-requests",
        )
        self._send(
            [admin.email for admin in admins],
            "Kudos - New team lead signup awaiting approval",
            html,
        )

    def notify_team_lead_decision(self, member: User) -> None:
        approved = member.activation_status == ActivationStatus.approved
        html = _render_template(
            "team-lead-decision.html",
            member_name=member.name,
            approved=approved,
            login_url=f"{self._settings.client_url}/login",
        )
        subject = (
            "Kudos - Your team lead account was approved"
            if approved
            else "Kudos - Your team lead request was declined"
        )
        self._send([member.email], subject, html)


def get_email_notifier(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> EmailNotifier:
    return EmailNotifier(settings)


EmailNotifierDep = Annotated[EmailNotifier, Depends(get_email_notifier)]
