"""Project and manuscript, as seen from the reader-feedback side.

Projects are owned by the wider platform. This service only reads them.
"""

from typing import Any

from pydantic import Field

from lyra.domain.model.common import DomainModel
from lyra.domain.value import ProjectId, UserId


class Manuscript(DomainModel):
    """The project's JSON document.

    Only ``chapters`` matters here: a list of chapter objects, each with an
    ``id`` and optional ``name``. Everything else the editor stores on a
    chapter (scenes, notes, ...) is passed through untouched. Entries that are
    not objects stay in the list so chapter positions are not shifted.
    """

    chapters: list[Any] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: dict[str, Any] | None) -> "Manuscript":
        chapters = (document or {}).get("chapters") or []
        return cls(chapters=list(chapters))

    def numbered_chapters(self) -> list[tuple[int, dict[str, Any]]]:
        """Chapter objects with their 1-based position in the stored list."""
        return [
            (number, chapter)
            for number, chapter in enumerate(self.chapters, start=1)
            if isinstance(chapter, dict)
        ]

    def chapter_names(self, chapter_ids) -> list[str]:
        """Names of the given chapters in manuscript order."""
        wanted = set(chapter_ids)
        return [
            ch.get("name") or "Untitled Chapter"
            for _, ch in self.numbered_chapters()
            if ch.get("id") in wanted
        ]


class Project(DomainModel):
    """A manuscript project owned by an author."""

    id: ProjectId
    owner_id: UserId
    title: str
    manuscript: Manuscript = Field(default_factory=Manuscript)
