"""Domain value objects for reader feedback.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import hashlib
import re
from enum import Enum

from pydantic import field_validator

from lyra.domain.value.common import RootValueObject


class InvitationStatus(str, Enum):
    """Lifecycle state of a reader invitation.

    pending -> accepted on first access; expired and revoked are terminal.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    REVOKED = "revoked"

    @property
    def is_terminal(self) -> bool:
        return self in (InvitationStatus.EXPIRED, InvitationStatus.REVOKED)


class MarkerType(str, Enum):
    """Kind of reader annotation."""

    NOTE = "note"
    QUESTION = "question"
    SUGGESTION = "suggestion"
    HIGHLIGHT = "highlight"
    REVISION = "revision"


_ACCESS_TOKEN_RE = re.compile(r"[0-9a-f]{64}")


def token_hint(raw: str) -> str:
    """Shorten an access token for logs."""
    return raw[:8] + "..."


class AccessToken(RootValueObject[str]):
    """Opaque capability token handed to a reader.

    Tokens are minted as 64 lowercase hex characters (256 bits). Lookups accept
    any non-empty string so a mistyped link simply finds nothing.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    @classmethod
    def from_raw(cls, raw: str) -> "AccessToken | None":
        """Token for a raw string, or None when it cannot be one we issued."""
        if not _ACCESS_TOKEN_RE.fullmatch(raw):
            return None
        return cls(raw)

    def hint(self) -> str:
        """Prefix safe to put in logs."""
        return token_hint(self.root)


class ChapterSet(RootValueObject[tuple[str, ...]]):
    """Ordered, duplicate-free set of chapter ids an invitation grants.

    Built once when the invitation is created and never changed; authors
    re-invite to change scope. Order follows the author's selection and is
    kept for display, while ``key`` ignores order so two selections of the
    same chapters identify the same reader circle.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_chapters(cls, v):
        """Accept any sequence of ids, dropping repeats but keeping order."""
        if isinstance(v, (str, bytes)) or not isinstance(v, (list, tuple)):
            raise ValueError("Chapters must be a list of chapter ids")
        seen: dict[str, None] = {}
        for chapter_id in v:
            if not isinstance(chapter_id, str) or not chapter_id.strip():
                raise ValueError("Chapter ids must be non-empty strings")
            seen.setdefault(chapter_id, None)
        if not seen:
            raise ValueError("At least one chapter is required")
        return tuple(seen)

    @property
    def key(self) -> str:
        """Order-independent fingerprint of the chapter selection."""
        canonical = "\n".join(sorted(self.root))
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    def __contains__(self, chapter_id: object) -> bool:
        return chapter_id in self.root

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def as_list(self) -> list[str]:
        return list(self.root)
