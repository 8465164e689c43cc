"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from lyra.domain.error import ValidationError
from lyra.domain.value import ChapterSet


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_chapters(chapter_ids: Any) -> ChapterSet:
    """Build a ChapterSet from client input.

    Raises:
        ValidationError: If the input is not a non-empty list of chapter ids
    """
    try:
        return ChapterSet(chapter_ids)
    except PydanticValidationError as e:
        raise ValidationError(e.errors()[0]["msg"]) from e
