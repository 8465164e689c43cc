"""Mock persistence providers for testing."""

from dishka import Scope, provide

from lyra.domain.repository import (
    AuthorRepository,
    InvitationRepository,
    MarkerRepository,
    ProjectRepository,
    ReaderContactRepository,
    ReadingSessionRepository,
)
from lyra.persistence.repository.inmemory import (
    InMemoryAuthorRepository,
    InMemoryInvitationRepository,
    InMemoryMarkerRepository,
    InMemoryProjectRepository,
    InMemoryReaderContactRepository,
    InMemoryReadingSessionRepository,
)
from lyra.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state outlives a single request: API tests make several
    calls against one container. Every test builds its own container, which
    keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invitation_repository(self) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository()

    @provide(scope=Scope.APP)
    def get_reading_session_repository(self) -> ReadingSessionRepository:
        """Provide in-memory reading session repository."""
        return InMemoryReadingSessionRepository()

    @provide(scope=Scope.APP)
    def get_marker_repository(self) -> MarkerRepository:
        """Provide in-memory marker repository."""
        return InMemoryMarkerRepository()

    @provide(scope=Scope.APP)
    def get_contact_repository(self) -> ReaderContactRepository:
        """Provide in-memory reader contact repository."""
        return InMemoryReaderContactRepository()

    @provide(scope=Scope.APP)
    def get_project_repository(self) -> ProjectRepository:
        """Provide in-memory project repository (seed with ``add``)."""
        return InMemoryProjectRepository()

    @provide(scope=Scope.APP)
    def get_author_repository(self) -> AuthorRepository:
        """Provide in-memory author repository (seed with ``add``)."""
        return InMemoryAuthorRepository()
