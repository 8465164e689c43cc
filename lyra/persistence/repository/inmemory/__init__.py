"""In-memory repository implementations for testing."""

from .author import InMemoryAuthorRepository
from .contact import InMemoryReaderContactRepository
from .invitation import InMemoryInvitationRepository
from .marker import InMemoryMarkerRepository
from .project import InMemoryProjectRepository
from .reading_session import InMemoryReadingSessionRepository

__all__ = [
    "InMemoryAuthorRepository",
    "InMemoryInvitationRepository",
    "InMemoryMarkerRepository",
    "InMemoryProjectRepository",
    "InMemoryReaderContactRepository",
    "InMemoryReadingSessionRepository",
]
