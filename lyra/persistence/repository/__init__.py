"""PostgreSQL repository implementations."""

from lyra.persistence.repository.author import PostgresAuthorRepository
from lyra.persistence.repository.contact import PostgresReaderContactRepository
from lyra.persistence.repository.invitation import PostgresInvitationRepository
from lyra.persistence.repository.marker import PostgresMarkerRepository
from lyra.persistence.repository.project import PostgresProjectRepository
from lyra.persistence.repository.reading_session import (
    PostgresReadingSessionRepository,
)

__all__ = [
    "PostgresAuthorRepository",
    "PostgresInvitationRepository",
    "PostgresMarkerRepository",
    "PostgresProjectRepository",
    "PostgresReaderContactRepository",
    "PostgresReadingSessionRepository",
]
