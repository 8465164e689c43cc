"""Repository interfaces for the reader-feedback domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from lyra.domain.repository.author import AuthorRepository
from lyra.domain.repository.contact import ReaderContactRepository
from lyra.domain.repository.invitation import InvitationRepository
from lyra.domain.repository.marker import MarkerRepository, MarkerTally
from lyra.domain.repository.project import ProjectRepository
from lyra.domain.repository.reading_session import ReadingSessionRepository

__all__ = [
    "AuthorRepository",
    "InvitationRepository",
    "MarkerRepository",
    "MarkerTally",
    "ProjectRepository",
    "ReaderContactRepository",
    "ReadingSessionRepository",
]
