"""Author, as seen from the reader-feedback side."""

from typing import Optional

from lyra.domain.model.common import DomainModel
from lyra.domain.value import UserId


class Author(DomainModel):
    """Platform user who owns projects and invites readers."""

    id: UserId
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Full name when both parts are known, otherwise the username."""
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.username
