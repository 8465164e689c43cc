"""Domain model entities for Lyra reader feedback."""

from lyra.domain.model.author import Author
from lyra.domain.model.contact import ReaderContact
from lyra.domain.model.invitation import Invitation, default_circle_name
from lyra.domain.model.marker import Marker
from lyra.domain.model.project import Manuscript, Project
from lyra.domain.model.reading_session import ReadingSession

__all__ = [
    "Author",
    "Invitation",
    "Manuscript",
    "Marker",
    "Project",
    "ReaderContact",
    "ReadingSession",
    "default_circle_name",
]
