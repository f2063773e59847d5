# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Outbound email transports.
send(to, subject, body) returns True on success, False on a non-success
response; connection problems raise NotificationError.
"""

import smtplib
from email.message import EmailMessage
from typing import Optional

import httpx

from welcome_desk.core.config import Settings
from welcome_desk.core.errors import NotificationError
from welcome_desk.core.logging import get_logger

logger = get_logger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class EmailTransport:
    name = "base"

    def send(self, to: str, subject: str, body: str) -> bool:
        raise NotImplementedError


class SMTPTransport(EmailTransport):
    name = "smtp"

    def __init__(self, host: str, port: int, user: str, password: str,
                 sender: str, starttls: bool = True, timeout: float = 10.0):
        self._host = host
        self._port = port
        self._user = user
        self._password = password
        self._sender = sender or user
        self._starttls = starttls
        self._timeout = timeout

    def send(self, to: str, subject: str, body: str) -> bool:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self._sender
        msg["To"] = to
        msg.set_content(body)
        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
                if self._starttls:
                    server.starttls()
                server.login(self._user, self._password)
                refused = server.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationError(f"SMTP delivery failed: {exc}", recipient=to) from exc
        if refused:
            logger.warning("SMTP server refused recipients: %s", list(refused))
            return False
        return True


class ResendTransport(EmailTransport):
    name = "resend"

    def __init__(self, api_key: str, sender: str, timeout: float = 10.0):
        self._api_key = api_key
        self._sender = sender
        self._timeout = timeout

    def send(self, to: str, subject: str, body: str) -> bool:
        try:
            resp = httpx.post(
                RESEND_API_URL,
                json={"from": self._sender, "to": [to], "subject": subject, "text": body},
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            raise NotificationError(f"Resend request failed: {exc}", recipient=to) from exc
        if resp.status_code >= 300:
            logger.warning("Resend returned %s: %s", resp.status_code, resp.text[:200])
            return False
        return True


def build_transport(config: Settings) -> Optional[EmailTransport]:
    """Pick a transport from configuration; None means notifications are disabled."""
    if config.RESEND_API_KEY:
        if not config.MAIL_FROM:
            logger.warning("RESEND_API_KEY set but MAIL_FROM is empty; email notifications disabled")
            return None
        return ResendTransport(config.RESEND_API_KEY, config.MAIL_FROM, config.EMAIL_TIMEOUT)
    if config.SMTP_USER and config.SMTP_PASS:
        return SMTPTransport(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            user=config.SMTP_USER,
            password=config.SMTP_PASS,
            sender=config.MAIL_FROM,
            starttls=config.SMTP_STARTTLS,
            timeout=config.EMAIL_TIMEOUT,
        )
    logger.warning("Email transport not configured; visitor notifications are disabled")
    return None
