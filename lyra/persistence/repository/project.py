"""PostgreSQL implementation of Project repository (read-only)."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from lyra.domain.model import Project
from lyra.domain.repository import ProjectRepository
from lyra.domain.value import ProjectId, UserId
from lyra.persistence.mappers import row_to_project
from lyra.persistence.tables import projects_table


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        stmt = select(projects_table).where(projects_table.c.project_id == project_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def find_owned(
        self, project_id: ProjectId, owner_id: UserId
    ) -> Optional[Project]:
        stmt = select(projects_table).where(
            and_(
                projects_table.c.project_id == project_id,
                projects_table.c.user_id == owner_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def find_titles(self, project_ids: list[ProjectId]) -> dict[ProjectId, str]:
        """Fetch titles only, skipping the manuscript document."""
        if not project_ids:
            return {}

        stmt = select(projects_table.c.project_id, projects_table.c.title).where(
            projects_table.c.project_id.in_(project_ids)
        )
        result = await self.session.execute(stmt)
        return {ProjectId(row.project_id): row.title for row in result.all()}
