# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Ministry notification dispatcher.
Routes a new visitor to the leader configured for their age group.
Best-effort — every failure is logged and swallowed.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from welcome_desk.core.logging import get_logger
from welcome_desk.metrics import NOTIFICATIONS_SENT
from welcome_desk.models.domain import AGE_GROUP_NOTIFICATION_KEY, LANGUAGE_NAMES
from welcome_desk.services.email_transport import EmailTransport

logger = get_logger(__name__)

SENT = "sent"
SKIPPED = "skipped"
FAILED = "failed"
DISABLED = "disabled"


def resolve_recipient(age_group: str, settings: Optional[Dict[str, Any]]) -> str:
    """Leader address for an age group, or "" when none is configured."""
    key = AGE_GROUP_NOTIFICATION_KEY.get(age_group)
    if key is None or not settings:
        return ""
    emails = settings.get("notification_emails") or {}
    return (emails.get(key) or "").strip()


def _format_timestamp(value: str) -> str:
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d %H:%M %Z").strip()
    except (TypeError, ValueError):
        return str(value)


def compose_message(visitor: Dict[str, Any]) -> tuple[str, str]:
    """Plain-text subject and body describing the visitor."""
    subject = f"New Visitor: {visitor['full_name']}"
    lines = [
        "A new visitor has submitted their information:",
        "",
        f"Name: {visitor['full_name']}",
        f"Phone: {visitor.get('phone') or 'Not provided'}",
        f"Email: {visitor.get('email') or 'Not provided'}",
        f"Age Group: {visitor['age_group']}",
        f"City: {visitor.get('city') or 'Not provided'}",
        f"How they heard about us: {visitor.get('hear_about') or 'Not provided'}",
        f"First time visitor: {'Yes' if visitor.get('is_first_time') else 'No'}",
        f"Language preference: {LANGUAGE_NAMES.get(visitor.get('language'), 'English')}",
        f"Notes: {visitor.get('notes') or 'None'}",
        "",
        f"Submitted on: {_format_timestamp(visitor['submission_date'])}",
    ]
    return subject, "\n".join(lines)


class NotificationDispatcher:
    """Email the ministry leader for a visitor's age group, if one is configured."""

    def __init__(self, transport: Optional[EmailTransport]):
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return self._transport is not None

    def notify(self, visitor: Dict[str, Any], settings: Optional[Dict[str, Any]]) -> str:
        """Attempt delivery and return the outcome. Never raises."""
        recipient = resolve_recipient(visitor["age_group"], settings)
        if not recipient:
            logger.info("No email configured for age group %s; notification skipped", visitor["age_group"])
            return self._record(SKIPPED)
        if self._transport is None:
            logger.warning("Email not configured; skipping notification for visitor %s", visitor["id"])
            return self._record(DISABLED)

        subject, body = compose_message(visitor)
        try:
            delivered = self._transport.send(recipient, subject, body)
        except Exception as exc:
            logger.error("Failed to send notification to %s for visitor %s: %s",
                         recipient, visitor["id"], exc)
            return self._record(FAILED)
        if not delivered:
            logger.error("Transport %s rejected notification to %s for visitor %s",
                         self._transport.name, recipient, visitor["id"])
            return self._record(FAILED)

        logger.info("Notification sent to %s for visitor %s", recipient, visitor["id"])
        return self._record(SENT)

    @staticmethod
    def _record(status: str) -> str:
        NOTIFICATIONS_SENT.labels(status=status).inc()
        return status
