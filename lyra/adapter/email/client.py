"""SMTP email client for reader invitations.

smtplib is blocking, so each send runs in a worker thread.
"""

import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

import logfire

from lyra.adapter.error import DeliveryError
from lyra.config import EmailSettings
from lyra.domain.service.notification_service import (
    ReaderInvitationEmail,
    ReaderNotifier,
)
from lyra.domain.value import token_hint
from lyra.util.error import ConfigurationError

from .templates import render_html, render_text, subject_line


class EmailNotifier(ReaderNotifier):
    """Base class for email notifiers.

    Provides type distinction for dependency injection.
    """

    pass


class SmtpEmailNotifier(EmailNotifier):
    """Sends reader invitations through an SMTP relay."""

    def __init__(self, settings: EmailSettings, frontend_url: str, reader_path: str):
        """Initialize SMTP notifier.

        Args:
            settings: SMTP connection and sender settings
            frontend_url: Base URL of the reader web app
            reader_path: Route readers land on, the token is appended
        """
        if not settings.smtp_host:
            raise ConfigurationError("EMAIL__SMTP_HOST must be set")
        self.settings = settings
        self.frontend_url = frontend_url.rstrip("/")
        self.reader_path = reader_path.rstrip("/")

    def reader_url(self, access_token: str) -> str:
        return f"{self.frontend_url}{self.reader_path}/{access_token}"

    def _build_message(self, email: ReaderInvitationEmail) -> MIMEMultipart:
        reader_url = self.reader_url(email.access_token)

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject_line(email)
        msg["From"] = formataddr((self.settings.from_name, self.settings.from_email))
        msg["To"] = email.reader_email
        msg.attach(MIMEText(render_text(email, reader_url), "plain"))
        msg.attach(MIMEText(render_html(email, reader_url), "html"))
        return msg

    def _send(self, msg: MIMEMultipart) -> None:
        with smtplib.SMTP(
            self.settings.smtp_host,
            self.settings.smtp_port,
            timeout=self.settings.timeout_seconds,
        ) as server:
            if self.settings.use_tls:
                server.starttls()
            if self.settings.smtp_user and self.settings.smtp_password:
                server.login(self.settings.smtp_user, self.settings.smtp_password)
            server.send_message(msg)

    async def send_reader_invitation(self, email: ReaderInvitationEmail) -> None:
        """Send one invitation email.

        Raises:
            DeliveryError: On any SMTP or connection failure
        """
        msg = self._build_message(email)

        with logfire.span(
            "smtp.send_reader_invitation",
            smtp_host=self.settings.smtp_host,
            token=token_hint(email.access_token),
        ):
            try:
                await asyncio.to_thread(self._send, msg)
            except smtplib.SMTPRecipientsRefused as e:
                raise DeliveryError(email.reader_email, "Recipient refused") from e
            except smtplib.SMTPAuthenticationError as e:
                raise DeliveryError(email.reader_email, "SMTP authentication failed") from e
            except (smtplib.SMTPException, OSError) as e:
                raise DeliveryError(email.reader_email, str(e)) from e


class MockEmailNotifier(EmailNotifier):
    """Email notifier for testing.

    Records every message instead of sending it. Addresses listed in
    ``failing`` raise DeliveryError, to exercise partial failure paths.
    """

    def __init__(self, failing: set[str] | None = None):
        self.sent: list[ReaderInvitationEmail] = []
        self.failing: set[str] = set(failing or ())

    async def send_reader_invitation(self, email: ReaderInvitationEmail) -> None:
        if email.reader_email in self.failing:
            raise DeliveryError(email.reader_email, "Mock delivery failure")
        self.sent.append(email)

    def sent_to(self, reader_email: str) -> list[ReaderInvitationEmail]:
        """Messages recorded for one address."""
        return [e for e in self.sent if e.reader_email == reader_email]
