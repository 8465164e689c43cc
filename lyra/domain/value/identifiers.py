"""Strongly typed identifiers for Lyra reader-feedback entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Owned by the wider platform, read-only here
UserId = NewType("UserId", UUID)
ProjectId = NewType("ProjectId", UUID)

# Reader feedback entities
InvitationId = NewType("InvitationId", UUID)
ReadingSessionId = NewType("ReadingSessionId", UUID)
MarkerId = NewType("MarkerId", UUID)
ReaderContactId = NewType("ReaderContactId", UUID)
