"""Project lookup service."""

import logfire

from lyra.domain.error import NotFoundError
from lyra.domain.model.author import Author
from lyra.domain.model.project import Project
from lyra.domain.repository import AuthorRepository, ProjectRepository
from lyra.domain.value import ProjectId, UserId

from .base import Service


class ProjectService(Service):
    """Read-side access to projects and authors owned by the platform."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        author_repository: AuthorRepository,
    ) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
            author_repository: Author repository
        """
        self.project_repository = project_repository
        self.author_repository = author_repository

    async def get_owned(self, project_id: ProjectId, author_id: UserId) -> Project:
        """Get a project the author owns.

        Args:
            project_id: Project ID
            author_id: User who must own the project

        Returns:
            The project

        Raises:
            NotFoundError: If missing or owned by someone else
        """
        project = await self.project_repository.find_owned(project_id, author_id)
        if not project:
            logfire.warn(
                "Project not found or not owned",
                project_id=str(project_id),
                author_id=str(author_id),
            )
            raise NotFoundError("Project", str(project_id))
        return project

    async def get(self, project_id: ProjectId) -> Project:
        """Get a project by ID.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_repository.find_by_id(project_id)
        if not project:
            raise NotFoundError("Project", str(project_id))
        return project

    async def get_author(self, author_id: UserId) -> Author:
        """Get an author by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        author = await self.author_repository.find_by_id(author_id)
        if not author:
            raise NotFoundError("Author", str(author_id))
        return author

    async def titles(self, project_ids: list[ProjectId]) -> dict[ProjectId, str]:
        """Titles for a set of projects; unknown ids are left out."""
        if not project_ids:
            return {}
        return await self.project_repository.find_titles(project_ids)
