"""Reader contact rollup.

Denormalized per (author, reader email) for acknowledgement pages. It trails
the invitation and marker tables and is never used for access decisions.
"""

from datetime import datetime

from lyra.domain.model.common import DomainModel
from lyra.domain.value import ReaderContactId, UserId


class ReaderContact(DomainModel):
    """Everything an author needs to thank a reader."""

    id: ReaderContactId
    author_id: UserId
    reader_name: str
    reader_email: str
    first_feedback_at: datetime
    last_feedback_at: datetime
    total_annotations: int = 0
    projects_reviewed: tuple[str, ...] = ()
