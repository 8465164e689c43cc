"""Domain layer DI providers."""

from dishka import Scope, provide

from lyra.adapter.email import EmailNotifier
from lyra.config import AuthSettings, InvitationSettings
from lyra.domain.repository import (
    AuthorRepository,
    InvitationRepository,
    MarkerRepository,
    ProjectRepository,
    ReaderContactRepository,
    ReadingSessionRepository,
)
from lyra.domain.service import (
    AccessTokenIssuer,
    ContactService,
    ContentFilter,
    InvitationService,
    JWTService,
    MarkerService,
    NotificationService,
    ProjectService,
    ReadingSessionService,
)
from lyra.util.clock import Clock
from lyra.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_token_issuer(self) -> AccessTokenIssuer:
        """Provide access token issuer."""
        return AccessTokenIssuer()

    @provide(scope=Scope.APP)
    def get_content_filter(self) -> ContentFilter:
        """Provide manuscript content filter."""
        return ContentFilter()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        token_issuer: AccessTokenIssuer,
        clock: Clock,
        settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            token_issuer=token_issuer,
            clock=clock,
            settings=settings,
        )

    @provide
    def get_reading_session_service(
        self, session_repository: ReadingSessionRepository, clock: Clock
    ) -> ReadingSessionService:
        """Provide reading session domain service."""
        return ReadingSessionService(session_repository=session_repository, clock=clock)

    @provide
    def get_marker_service(
        self, marker_repository: MarkerRepository, clock: Clock
    ) -> MarkerService:
        """Provide marker domain service."""
        return MarkerService(marker_repository=marker_repository, clock=clock)

    @provide
    def get_contact_service(
        self, contact_repository: ReaderContactRepository, clock: Clock
    ) -> ContactService:
        """Provide reader contact domain service."""
        return ContactService(contact_repository=contact_repository, clock=clock)

    @provide
    def get_project_service(
        self,
        project_repository: ProjectRepository,
        author_repository: AuthorRepository,
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(
            project_repository=project_repository,
            author_repository=author_repository,
        )

    @provide
    def get_notification_service(self, notifier: EmailNotifier) -> NotificationService:
        """Provide notification domain service backed by the email notifier."""
        return NotificationService(notifier=notifier)
