"""Email adapter."""

from .client import EmailNotifier, MockEmailNotifier, SmtpEmailNotifier

__all__ = ["EmailNotifier", "SmtpEmailNotifier", "MockEmailNotifier"]
