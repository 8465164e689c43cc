"""Project repository interface.

Projects belong to the wider platform; this service only reads them.
"""

from abc import ABC, abstractmethod

from lyra.domain.model.project import Project
from lyra.domain.value import ProjectId, UserId


class ProjectRepository(ABC):
    """Read-only access to projects and their manuscripts."""

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Project | None:
        """Find a project by ID.

        Args:
            project_id: The project's ID

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_owned(
        self, project_id: ProjectId, owner_id: UserId
    ) -> Project | None:
        """Find a project owned by the given user.

        Args:
            project_id: The project's ID
            owner_id: The user who must own it

        Returns:
            The project if it exists and belongs to the user, None otherwise
        """
        pass

    @abstractmethod
    async def find_titles(self, project_ids: list[ProjectId]) -> dict[ProjectId, str]:
        """Look up project titles without loading manuscripts.

        Args:
            project_ids: Projects to look up

        Returns:
            Mapping of project ID to title
        """
        pass
