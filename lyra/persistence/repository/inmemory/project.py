"""In-memory project repository for testing.

Projects are owned by the wider platform, so tests seed them with ``add``.
"""

from typing import Optional

from lyra.domain.model.project import Project
from lyra.domain.repository.project import ProjectRepository
from lyra.domain.value import ProjectId, UserId


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self) -> None:
        self._projects: dict[ProjectId, Project] = {}

    def add(self, project: Project) -> Project:
        """Seed a project."""
        self._projects[project.id] = project
        return project

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        return self._projects.get(project_id)

    async def find_owned(
        self, project_id: ProjectId, owner_id: UserId
    ) -> Optional[Project]:
        project = self._projects.get(project_id)
        if project and project.owner_id == owner_id:
            return project
        return None

    async def find_titles(self, project_ids: list[ProjectId]) -> dict[ProjectId, str]:
        return {
            pid: self._projects[pid].title
            for pid in project_ids
            if pid in self._projects
        }
