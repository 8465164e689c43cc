"""Content filter for reader access."""

from typing import Any

from lyra.domain.model.project import Manuscript
from lyra.domain.value import ChapterSet

from .base import Service

CHAPTER_NUMBER_KEY = "chapterNumber"


class ContentFilter(Service):
    """Projects a manuscript down to the chapters an invitation grants."""

    def filter_chapters(
        self, manuscript: Manuscript, chapters: ChapterSet
    ) -> list[dict[str, Any]]:
        """Return the granted chapters with their true chapter numbers.

        Numbers come from each chapter's position in the full manuscript, so a
        reader granted chapters 2 and 4 sees "Chapter 2" and "Chapter 4". Granted
        ids that are no longer in the manuscript are skipped.

        Args:
            manuscript: The author's full manuscript
            chapters: Chapters the invitation grants

        Returns:
            Copies of the granted chapter objects, in manuscript order, each
            with a 1-based ``chapterNumber``
        """
        return [
            {**chapter, CHAPTER_NUMBER_KEY: number}
            for number, chapter in manuscript.numbered_chapters()
            if chapter.get("id") in chapters
        ]
