"""Test configuration and shared builders."""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import jwt

from lyra.config import AuthSettings, Settings
from lyra.domain.model import Author, Manuscript, Project
from lyra.domain.repository import AuthorRepository, ProjectRepository
from lyra.domain.service import ReaderInvitationEmail
from lyra.domain.value import ProjectId, UserId

# Where the frozen test clock starts
T0 = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

CHAPTERS: list[dict[str, Any]] = [
    {"id": "ch-1", "name": "The Quiet Harbour", "scenes": [{"id": "s-1"}]},
    {"id": "ch-2", "name": "Salt and Iron", "scenes": [{"id": "s-2"}]},
    {"id": "ch-3", "name": "Undertow", "scenes": [{"id": "s-3"}]},
    {"id": "ch-4", "name": "Lantern Season", "scenes": [{"id": "s-4"}]},
]


def in_days(days: int) -> datetime:
    """A moment ``days`` after the frozen clock's start."""
    return T0 + timedelta(days=days)


async def seed_author_and_project(
    author_repository: AuthorRepository,
    project_repository: ProjectRepository,
    title: str = "The Lighthouse Keeper",
    chapters: list[dict[str, Any]] | None = None,
    author: Author | None = None,
) -> tuple[Author, Project]:
    """Seed an author owning one project in the in-memory repositories.

    Pass ``author`` to give an already seeded author another project.
    """
    if author is None:
        author = Author(
            id=UserId(uuid4()),
            username="mara",
            first_name="Mara",
            last_name="Quill",
        )
        author_repository.add(author)
    project = Project(
        id=ProjectId(uuid4()),
        owner_id=author.id,
        title=title,
        manuscript=Manuscript.from_document(
            {"chapters": CHAPTERS if chapters is None else chapters}
        ),
    )
    project_repository.add(project)
    return author, project


def author_cookie(author: Author, settings: AuthSettings | None = None) -> str:
    """A signed ``auth_token`` value for the author, valid for a day.

    Stands in for the account service that issues author sessions.
    """
    settings = settings or Settings().auth
    payload = {
        "user_id": str(author.id),
        "username": author.username,
        "exp": datetime.now(timezone.utc) + timedelta(days=1),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def reader_invitation_email(**overrides: Any) -> ReaderInvitationEmail:
    """An invitation email for Ada, overridable field by field."""
    fields: dict[str, Any] = dict(
        reader_email="ada@example.com",
        reader_name="Ada",
        project_title="The Lighthouse Keeper",
        author_name="Mara Quill",
        access_token="a" * 64,
        expires_at=datetime(2025, 2, 14, 9, 0, tzinfo=timezone.utc),
        message=None,
        chapter_names=("The Quiet Harbour", "Undertow"),
    )
    fields.update(overrides)
    return ReaderInvitationEmail(**fields)
