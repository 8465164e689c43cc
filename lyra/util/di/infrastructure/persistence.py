"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lyra.config import Settings
from lyra.domain.repository import (
    AuthorRepository,
    InvitationRepository,
    MarkerRepository,
    ProjectRepository,
    ReaderContactRepository,
    ReadingSessionRepository,
)
from lyra.persistence.database import create_engine, create_session_factory
from lyra.persistence.repository import (
    PostgresAuthorRepository,
    PostgresInvitationRepository,
    PostgresMarkerRepository,
    PostgresProjectRepository,
    PostgresReaderContactRepository,
    PostgresReadingSessionRepository,
)
from lyra.util.di.base import ProviderBase
from lyra.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed when the request scope closes without an
        exception escaping it, and rolled back otherwise. Domain errors that
        routes turn into HTTPException responses do not escape the scope,
        so writes made before them (such as marking an invitation expired)
        are kept.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reading_session_repository(
        self, session: AsyncSession
    ) -> ReadingSessionRepository:
        """Provide ReadingSession repository."""
        return PostgresReadingSessionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_marker_repository(self, session: AsyncSession) -> MarkerRepository:
        """Provide Marker repository."""
        return PostgresMarkerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_contact_repository(
        self, session: AsyncSession
    ) -> ReaderContactRepository:
        """Provide ReaderContact repository."""
        return PostgresReaderContactRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, session: AsyncSession) -> ProjectRepository:
        """Provide Project repository."""
        return PostgresProjectRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_author_repository(self, session: AsyncSession) -> AuthorRepository:
        """Provide Author repository."""
        return PostgresAuthorRepository(session)
