"""Email infrastructure providers."""

from dishka import Scope, provide

from lyra.adapter.email import EmailNotifier, SmtpEmailNotifier
from lyra.config import Settings
from lyra.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider sending through SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_notifier(self, settings: Settings) -> EmailNotifier:
        """Provide SMTP email notifier.

        Raises:
            ConfigurationError: If no SMTP host is configured
        """
        return SmtpEmailNotifier(
            settings=settings.email,
            frontend_url=settings.api.frontend_url,
            reader_path=settings.invitations.reader_path,
        )
